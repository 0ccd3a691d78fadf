from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class ApiConfig(BaseModel):
    """Connection settings for the trivia question endpoint."""

    base_url: str = Field("https://opentdb.com/api.php", description="Trivia API endpoint.")
    question_type: str = Field("multiple", description="Question type requested from the API.")
    timeout_seconds: float = Field(10.0, gt=0)


class CategoryOption(BaseModel):
    """One entry of the category menu shown to the player."""

    id: int
    name: str


def _default_categories() -> List[CategoryOption]:
    return [
        CategoryOption(id=9, name="General Knowledge"),
        CategoryOption(id=14, name="TV"),
        CategoryOption(id=10, name="Books"),
        CategoryOption(id=12, name="Music"),
        CategoryOption(id=11, name="Film"),
    ]


class QuizConfig(BaseModel):
    """Controls for the interactive quiz session."""

    categories: List[CategoryOption] = Field(default_factory=_default_categories)
    max_questions: int = Field(50, ge=1)

    @field_validator("categories")
    @classmethod
    def ensure_categories(cls, value: List[CategoryOption]) -> List[CategoryOption]:
        """Require at least one category so the menu is never empty."""
        if not value:
            raise ValueError("categories must list at least one entry")
        return value


class LoggingConfig(BaseModel):
    """Controls for log output and format."""

    level: str = Field("WARNING")
    use_json: bool = False


class Settings(BaseModel):
    """Top-level project configuration aggregating all sub-settings."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    quiz: QuizConfig = Field(default_factory=QuizConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
