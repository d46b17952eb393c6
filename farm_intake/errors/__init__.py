"""
Error classification for the farm intake workflow.

Store operations and rule stages are total over their inputs; these exceptions
cover configuration loading and unexpected failures inside the pipeline.
"""

from .base import FarmIntakeError
from .configuration import ConfigurationError
from .pipeline import StageExecutionError

__all__ = [
    "FarmIntakeError",
    "ConfigurationError",
    "StageExecutionError",
]
