"""
Farm intake driver.

Wires a configuration, the in-memory store and the rule pipeline together,
runs requests through the pipeline and prints the store contents.
"""

from typing import Optional, TextIO

import structlog

from .config.defaults import AppConfig, default_profile
from .pipeline.models import PipelineRun, ProcessContext, Request
from .pipeline.runner import ProcessPipeline
from .report.console import ReportFormat, print_report
from .store.farm_system import FarmSystem

logger = structlog.get_logger(__name__)

DEFAULT_REQUEST = Request(
    article_name="Shiitake",
    farmer_name="John",
    date="2023-10-26",
    quantity=10,
)


class App:
    """Coordinates a single intake run."""

    def __init__(
        self,
        system: Optional[FarmSystem] = None,
        config: Optional[AppConfig] = None,
        pipeline: Optional[ProcessPipeline] = None
    ) -> None:
        self.system = system if system is not None else FarmSystem()
        self.config = config if config is not None else default_profile()
        self.pipeline = pipeline if pipeline is not None else ProcessPipeline()

    def set_config(self, new_config: AppConfig) -> None:
        """Replace the configuration used by subsequent runs."""
        self.config = new_config
        logger.info("Configuration replaced")

    def run(self, ctx: ProcessContext) -> PipelineRun:
        """Run one request context through the pipeline."""
        outcome = self.pipeline.run(self.config, self.system, ctx)
        logger.info(
            "Intake run finished",
            request_id=ctx.request.request_id,
            stopped_by=outcome.stopped_by,
            completed=outcome.completed
        )
        return outcome

    def run_request(self, request: Request) -> PipelineRun:
        return self.run(ProcessContext(request))

    def display_output(
        self,
        stream: Optional[TextIO] = None,
        fmt: ReportFormat = ReportFormat.TEXT
    ) -> None:
        print_report(self.system, fmt, stream)
