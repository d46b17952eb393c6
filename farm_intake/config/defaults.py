"""Default configuration profile for the farm intake workflow."""

from dataclasses import dataclass
from enum import Enum


class UserType(str, Enum):
    """Kind of user submitting the request."""
    REGULAR = "regular"
    NON_REGULAR = "non_regular"


class Location(str, Enum):
    """Region the request is fulfilled from."""
    WEST = "west"
    EAST = "east"


@dataclass(frozen=True)
class AppConfig:
    """Immutable bundle of the flags consulted by the rule stages."""
    special_permission: bool = True                  # Gate for the whole pipeline
    user_type: UserType = UserType.REGULAR
    is_weekend: bool = False
    is_active_user: bool = True
    is_high_priority: bool = True
    location: Location = Location.WEST               # WEST stocks in, EAST stocks out


def default_profile() -> AppConfig:
    """Get the default configuration instance."""
    return AppConfig(
        special_permission=True,
        user_type=UserType.REGULAR,
        is_weekend=False,
        is_active_user=True,
        is_high_priority=True,
        location=Location.WEST,
    )
