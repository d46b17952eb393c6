"""Rule pipeline failures."""

from typing import Optional

from .base import FarmIntakeError


class StageExecutionError(FarmIntakeError):
    """A rule stage raised while processing a request."""

    def __init__(self, message: str, stage_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.stage_name = stage_name
