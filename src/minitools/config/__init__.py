from .loader import load_settings
from .schema import LoggingConfig, QuizConfig, RedirectConfig, Settings

__all__ = ["LoggingConfig", "QuizConfig", "RedirectConfig", "Settings", "load_settings"]
