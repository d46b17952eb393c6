"""Configuration loading errors."""

from typing import Any, List, Optional

from .base import FarmIntakeError


class ConfigurationError(FarmIntakeError):
    """Configuration profile is missing or holds invalid values."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 profile: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.profile = profile
