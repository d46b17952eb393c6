"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from typing import Any, Callable

import pytest

from farm_intake.config.defaults import AppConfig, default_profile
from farm_intake.logging.config import configure_logging
from farm_intake.pipeline.models import ProcessContext, Request
from farm_intake.store.farm_system import FarmSystem


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> None:
    """Keep structlog output off stdout so report assertions stay exact."""
    configure_logging(level="WARNING")


@pytest.fixture
def default_config() -> AppConfig:
    return default_profile()


@pytest.fixture
def make_config() -> Callable[..., AppConfig]:
    """Factory for default-profile configs with selected fields replaced."""
    def _make(**changes: Any) -> AppConfig:
        return replace(default_profile(), **changes)
    return _make


@pytest.fixture
def system() -> FarmSystem:
    return FarmSystem()


@pytest.fixture
def sample_request() -> Request:
    """The request used by the default driver run."""
    return Request(
        article_name="Shiitake",
        farmer_name="John",
        date="2023-10-26",
        quantity=10,
    )


@pytest.fixture
def ctx(sample_request: Request) -> ProcessContext:
    return ProcessContext(sample_request)
