"""Sequential runner for the rule stages."""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import AppConfig
from ..errors import StageExecutionError
from ..logging.config import get_pipeline_logger, log_stage_decision
from ..store.farm_system import FarmSystem
from .models import PipelineRun, ProcessContext, StageResult
from .stages import Stage, default_stages

pipeline_logger = get_pipeline_logger(__name__)


class ProcessPipeline:
    """Runs stages in order until one returns StageResult.STOP."""

    def __init__(self, stages: Optional[Sequence[Stage]] = None) -> None:
        self.stages: tuple[Stage, ...] = tuple(stages if stages is not None else default_stages())
        self.logger = pipeline_logger

    def run(self, config: AppConfig, system: FarmSystem, ctx: ProcessContext) -> PipelineRun:
        """
        Run the request held by ctx through every stage.

        Args:
            config: Active configuration
            system: Store receiving the terminal stage's writes
            ctx: Per-run context, mutated by annotating stages

        Returns:
            PipelineRun describing which stages ran and where the chain stopped

        Raises:
            StageExecutionError: if a stage raises unexpectedly
        """
        outcome = PipelineRun()
        request_id = ctx.request.request_id

        for stage in self.stages:
            try:
                result = stage.apply(config, system, ctx)
            except Exception as e:
                self.logger.error(
                    "Stage raised during execution",
                    stage_name=stage.name,
                    request_id=request_id,
                    error=str(e)
                )
                raise StageExecutionError(
                    f"Stage '{stage.name}' failed: {e}",
                    stage_name=stage.name,
                    context={"request_id": request_id, "flags": ctx.flags()}
                ) from e

            outcome.executed.append(stage.name)
            stopped = result == StageResult.STOP
            log_stage_decision(
                self.logger,
                stage_name=stage.name,
                stopped=stopped,
                request_id=request_id,
                context=ctx.flags()
            )

            if stopped:
                outcome.stopped_by = stage.name
                outcome.completed = stage is self.stages[-1]
                return outcome

        return outcome
