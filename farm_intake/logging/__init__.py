"""
Logging configuration and utilities for the farm intake workflow.
"""
from .config import configure_logging, get_logger, get_pipeline_logger, log_stage_decision

__all__ = ["configure_logging", "get_logger", "get_pipeline_logger", "log_stage_decision"]
