"""Tests for interactive collection of quiz options."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import ScriptedInput
from trivia_quiz.quiz.models import QuizOptions
from trivia_quiz.quiz.options import QuizAborted, parse_int, prompt_options


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("10", 10),
        (" 7 ", 7),
        ("4abc", 4),
        ("-3", -3),
        ("abc", None),
        ("", None),
        ("1.5", 1),
        ("\u0663", None),
        ("\uff13", None),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_prompts_in_order(console, settings):
    ask = ScriptedInput(["5", "Medium", "12"])
    options = prompt_options(ask, console, settings.quiz.categories)

    assert options == QuizOptions(number_of_questions=5, difficulty="medium", category=12)
    assert ask.prompts == [
        "Enter the number of questions: ",
        "Enter the difficulty (easy, medium, hard): ",
        "",
    ]


def test_category_menu_is_printed(console, output, settings):
    prompt_options(ScriptedInput(["1", "easy", "9"]), console, settings.quiz.categories)
    text = output.getvalue()

    assert "Choose a category:" in text
    for line in ["9. General Knowledge", "14. TV", "10. Books", "12. Music", "11. Film"]:
        assert line in text


def test_invalid_answers_are_asked_again(console, output, settings):
    ask = ScriptedInput(["ten", "0", "3", "impossible", "hard", "music", "11"])
    options = prompt_options(ask, console, settings.quiz.categories)

    assert options.number_of_questions == 3
    assert options.difficulty == "hard"
    assert options.category == 11
    text = output.getvalue()
    assert "whole number between 1 and 50" in text
    assert "Difficulty must be one of" in text
    assert "Category must be a number" in text


def test_count_above_maximum_is_rejected(console, settings):
    ask = ScriptedInput(["51", "50", "easy", "9"])
    options = prompt_options(ask, console, settings.quiz.categories)
    assert options.number_of_questions == 50


def test_preset_values_skip_prompts(console, settings):
    ask = ScriptedInput(["10"])
    options = prompt_options(
        ask, console, settings.quiz.categories, number_of_questions=2, difficulty="easy"
    )
    assert options.category == 10
    assert ask.prompts == [""]


def test_end_of_input_aborts(console, settings):
    with pytest.raises(QuizAborted):
        prompt_options(ScriptedInput(["3"]), console, settings.quiz.categories)


def test_options_are_immutable():
    options = QuizOptions(number_of_questions=1, difficulty="easy", category=9)
    with pytest.raises(ValidationError):
        options.category = 10


def test_options_reject_unknown_difficulty():
    with pytest.raises(ValidationError):
        QuizOptions(number_of_questions=1, difficulty="extreme", category=9)
