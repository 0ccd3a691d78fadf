from .loader import load_settings
from .schema import ApiConfig, CategoryOption, LoggingConfig, QuizConfig, Settings

__all__ = [
    "ApiConfig",
    "CategoryOption",
    "LoggingConfig",
    "QuizConfig",
    "Settings",
    "load_settings",
]
