"""Command line entry point for a single farm intake run."""

import argparse
import sys
from pathlib import Path
from typing import Optional

import structlog

from .app import DEFAULT_REQUEST, App
from .config.loader import DEFAULT_PROFILE_NAME, ConfigLoader
from .errors import ConfigurationError
from .logging.config import configure_logging
from .report.console import ReportFormat

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="farm-intake",
        description="Run the default farm-supply request through the intake rule pipeline."
    )
    parser.add_argument("--profile", default=DEFAULT_PROFILE_NAME,
                        help="Configuration profile name from profiles.yaml")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding profiles.yaml")
    parser.add_argument("--format", dest="fmt", default=ReportFormat.TEXT.value,
                        choices=[f.value for f in ReportFormat],
                        help="Report format")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-json", action="store_true",
                        help="Emit logs as JSON")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)

    try:
        config = ConfigLoader.create(args.config_dir).load(args.profile)
    except ConfigurationError as e:
        logger.error("Could not load configuration", profile=args.profile, error=str(e))
        for err in e.errors:
            print(f"{err.field}: {err.message} (got: {err.value})", file=sys.stderr)
        if not e.errors:
            print(str(e), file=sys.stderr)
        return 2

    app = App(config=config)
    app.run_request(DEFAULT_REQUEST)
    app.display_output(fmt=ReportFormat(args.fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
