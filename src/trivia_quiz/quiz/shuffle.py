from __future__ import annotations

import random
from typing import List, MutableSequence, Optional, TypeVar

from trivia_quiz.quiz.models import Question

T = TypeVar("T")


def shuffle_in_place(items: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Fisher-Yates shuffle of `items`, returning the same sequence object."""
    source = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = source.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def build_choices(question: Question, rng: Optional[random.Random] = None) -> List[str]:
    """Return the incorrect answers plus the correct one, in random order."""
    choices = [*question.incorrect_answers, question.correct_answer]
    shuffle_in_place(choices, rng)
    return choices
