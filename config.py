"""
Configuration management using Pydantic Settings with safe access wrapper
"""
from pydantic_settings import BaseSettings
from typing import List, Any
import logging

# Sejong tag names accepted as default dictionary query tags
_DICTIONARY_TAG_NAMES = {
    "NNG", "NNP", "NNB", "NNM", "NR", "NP",
    "VV", "VA", "VX", "VCP", "VCN",
    "MM", "MAG", "MAJ", "IC",
    "XPN", "XPV", "XSN", "XSV", "XSM", "XSO", "XR",
    "SL", "SH", "SN",
}


class Settings(BaseSettings):
    # Application settings
    app_name: str = "KoalaNLP Bridge"
    version: str = "1.9.0"
    environment: str = "production"

    # Callback mode worker pool
    callback_workers: int = 4

    # Dictionary settings
    default_dictionary_tags: List[str] = ["NNP", "NNG"]

    # Logging settings
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    log_file_max_bytes: int = 10485760
    log_file_backup_count: int = 10

    class Config:
        env_prefix = "KOALA_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"   # allow unknown env vars without error

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._validated = False
        self.validate_settings()

    def validate_settings(self):
        """Validate critical settings on startup"""
        if self._validated:
            return

        errors = []

        if self.environment not in ["development", "testing", "production"]:
            errors.append(f"Invalid environment: {self.environment}")

        if self.callback_workers < 1:
            errors.append(f"callback_workers must be positive, got {self.callback_workers}")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"Invalid log level: {self.log_level}")

        unknown_tags = [t for t in self.default_dictionary_tags if t.upper() not in _DICTIONARY_TAG_NAMES]
        if unknown_tags:
            errors.append(f"Unknown default dictionary tags: {unknown_tags}")
        if not self.default_dictionary_tags:
            errors.append("default_dictionary_tags must not be empty")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")

        self._validated = True


class SafeSettings:
    """Safe wrapper for settings with fallback defaults"""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._defaults = {
            "callback_workers": 4,
            "default_dictionary_tags": ["NNP", "NNG"],
            "log_level": "INFO",
            "log_to_file": False,
            "log_dir": "logs",
            "log_file_max_bytes": 10485760,
            "log_file_backup_count": 10,
            "environment": "production",
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Safely get setting value with fallback"""
        value = getattr(self._settings, key, None)
        if value is None:
            value = self._defaults.get(key, default)
        return value

    def __getattr__(self, key: str) -> Any:
        """Proxy attribute access with safety"""
        return self.get(key)

    @property
    def raw(self) -> Settings:
        """Get raw settings object"""
        return self._settings


# Initialize settings with safety wrapper
_raw_settings = Settings()
settings = SafeSettings(_raw_settings)
