"""
Rule stages for the intake pipeline.

Each stage inspects the configuration and either annotates the context or,
for the terminal LocationFinalizer, writes the request into the store.
"""

from abc import ABC, abstractmethod

import structlog

from ..config.defaults import AppConfig, Location, UserType
from ..store.farm_system import FarmSystem
from .models import ProcessContext, StageResult

logger = structlog.get_logger(__name__)

EAST_FARMER_SUFFIX = "-east"


class Stage(ABC):
    """Base class for a rule stage."""

    name: str = "stage"

    @abstractmethod
    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        """Inspect config/context and return whether the pipeline should stop."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PermissionGate(Stage):
    """Stops the pipeline unless the profile carries special permission."""

    name = "permission_gate"

    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        if not config.special_permission:
            return StageResult.STOP
        return StageResult.CONTINUE


class NonRegularAnnotator(Stage):
    """Flags requests from users who are not REGULAR."""

    name = "non_regular"

    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        if config.user_type != UserType.REGULAR:
            ctx.mark_non_regular()
        return StageResult.CONTINUE


class HighPriorityAnnotator(Stage):
    """Flags high-priority requests."""

    name = "high_priority"

    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        if config.is_high_priority:
            ctx.mark_high_priority()
        return StageResult.CONTINUE


class WeekendAnnotator(Stage):
    """Flags requests made on a weekend."""

    name = "weekend"

    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        if config.is_weekend:
            ctx.mark_weekend()
        return StageResult.CONTINUE


class InactiveAnnotator(Stage):
    """Flags inactive users; the finalizer renders this as a -NA farmer suffix."""

    name = "inactive_user"

    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        if not config.is_active_user:
            ctx.mark_non_active()
        return StageResult.CONTINUE


class LocationFinalizer(Stage):
    """
    Terminal stage: records the decorated request in the store.

    WEST stocks the quantity in under the decorated farmer name. EAST records
    the farmer with an extra "-east" suffix and stocks the quantity out.
    """

    name = "location"

    def apply(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> StageResult:
        article = system.add_article(ctx.article_name())
        farmer = ctx.farmer_name()

        if config.location == Location.WEST:
            system.add_farmer(farmer)
            system.add_schedule(article, ctx.date())
            system.add_stock(article, ctx.quantity())
        elif config.location == Location.EAST:
            system.add_farmer(farmer + EAST_FARMER_SUFFIX)
            system.add_schedule(article, ctx.date())
            system.add_stock(article, -ctx.quantity())

        logger.info(
            "Request recorded",
            location=config.location.name,
            article=article.name,
            farmer=farmer,
            quantity=ctx.quantity()
        )
        return StageResult.STOP


def default_stages() -> list[Stage]:
    """The fixed stage order used by the driver."""
    return [
        PermissionGate(),
        NonRegularAnnotator(),
        HighPriorityAnnotator(),
        WeekendAnnotator(),
        InactiveAnnotator(),
        LocationFinalizer(),
    ]
