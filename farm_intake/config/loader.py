"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError
from .defaults import AppConfig, default_profile
from .validation import ENUM_FIELDS, ConfigValidator, coerce_enum

logger = structlog.get_logger(__name__)

DEFAULT_PROFILE_NAME = "default"


@dataclass(frozen=True)
class ConfigLoader:
    """Builds AppConfig instances from defaults, profile files and overrides."""

    config_dir: Path
    defaults: AppConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent

        return cls(
            config_dir=Path(config_dir),
            defaults=default_profile(),
        )

    @property
    def profiles_file(self) -> Path:
        return self.config_dir / "profiles.yaml"

    def load_profiles(self) -> dict[str, dict[str, Any]]:
        """Read all named profiles from profiles.yaml, empty if the file is absent."""
        if not self.profiles_file.exists():
            return {}

        try:
            with open(self.profiles_file) as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Malformed profiles file: {self.profiles_file}",
                context={"config_dir": str(self.config_dir), "error": str(e)}
            ) from e

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Profiles file must contain a mapping: {self.profiles_file}",
                context={"config_dir": str(self.config_dir)}
            )

        profiles = raw.get("profiles") or {}
        if not isinstance(profiles, dict):
            raise ConfigurationError(
                "'profiles' must be a mapping of profile names to settings",
                context={"config_dir": str(self.config_dir)}
            )

        return profiles

    def load_profile_overrides(self, profile: str) -> dict[str, Any]:
        """Load the overrides for one named profile."""
        profiles = self.load_profiles()

        if profile in profiles:
            overrides = profiles[profile] or {}
            if not isinstance(overrides, dict):
                raise ConfigurationError(
                    f"Profile '{profile}' must be a mapping of settings",
                    profile=profile,
                    context={"config_dir": str(self.config_dir)}
                )
            return dict(overrides)

        if profile == DEFAULT_PROFILE_NAME:
            return {}

        raise ConfigurationError(
            f"Unknown configuration profile: {profile}",
            profile=profile,
            context={"available": sorted(profiles), "config_dir": str(self.config_dir)}
        )

    def merge_config(
        self,
        profile: str = DEFAULT_PROFILE_NAME,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Named profile from profiles.yaml
        3. Default profile (lowest priority)
        """
        config = asdict(self.defaults)
        config.update(self.load_profile_overrides(profile))

        if overrides:
            config.update(overrides)

        return config

    def load(
        self,
        profile: str = DEFAULT_PROFILE_NAME,
        overrides: Optional[dict[str, Any]] = None
    ) -> AppConfig:
        """Build a validated AppConfig for the given profile."""
        merged = self.merge_config(profile, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error(
                "Configuration validation failed",
                profile=profile,
                errors=error_msgs
            )
            raise ConfigurationError(
                f"Invalid configuration profile: {profile}",
                errors=errors,
                profile=profile
            )

        for name, enum_cls in ENUM_FIELDS.items():
            merged[name] = coerce_enum(enum_cls, merged[name])

        config = AppConfig(**merged)
        logger.info("Configuration loaded", profile=profile, config=asdict(config))
        return config
