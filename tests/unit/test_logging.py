"""Tests for structured stage-decision logging."""

from structlog.testing import capture_logs

from farm_intake.logging.config import get_pipeline_logger, log_stage_decision


class TestStageDecisionLogging:
    """Test log_stage_decision output."""

    def test_stop_logged_at_info(self) -> None:
        with capture_logs() as logs:
            logger = get_pipeline_logger("tests.logging")
            log_stage_decision(
                logger,
                stage_name="permission_gate",
                stopped=True,
                request_id="Shiitake/John/2023-10-26",
            )

        assert len(logs) == 1
        entry = logs[0]
        assert entry["log_level"] == "info"
        assert entry["event"] == "Pipeline stopped"
        assert entry["stage_result"] == "STOP"
        assert entry["subsystem"] == "pipeline"
        assert "context" not in entry

    def test_continue_logged_at_debug_with_flags(self) -> None:
        flags = {"non_regular": False, "high_priority": True, "weekend": False, "non_active": False}
        with capture_logs() as logs:
            logger = get_pipeline_logger("tests.logging")
            log_stage_decision(
                logger,
                stage_name="high_priority",
                stopped=False,
                request_id="Shiitake/John/2023-10-26",
                context=flags,
            )

        assert logs[0]["log_level"] == "debug"
        assert logs[0]["stage_result"] == "CONTINUE"
        assert logs[0]["context"] == flags
