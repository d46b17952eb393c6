"""Base exception for the farm intake workflow."""

from typing import Any, Dict, Optional


class FarmIntakeError(Exception):
    """Base class for all farm intake errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
