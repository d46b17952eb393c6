"""Console report of the store contents."""

import json
import sys
from enum import Enum
from typing import Optional, TextIO

from ..store.farm_system import FarmSystem


class ReportFormat(str, Enum):
    """Supported report formats."""
    TEXT = "text"
    JSON = "json"


def render_text(system: FarmSystem) -> str:
    """Render the four store sections as plain text."""
    lines = ["Articles:"]
    lines.extend(str(article) for article in system.articles)

    lines.append("")
    lines.append("Farmers:")
    lines.extend(str(farmer) for farmer in system.farmers)

    lines.append("")
    lines.append("Schedules:")
    lines.extend(str(schedule) for schedule in system.schedules)

    lines.append("")
    lines.append("Inventory:")
    lines.extend(str(item) for item in system.inventory.values())

    return "\n".join(lines)


def render_json(system: FarmSystem) -> str:
    return json.dumps(system.snapshot(), indent=2)


def render(system: FarmSystem, fmt: ReportFormat = ReportFormat.TEXT) -> str:
    if ReportFormat(fmt) == ReportFormat.JSON:
        return render_json(system)
    return render_text(system)


def print_report(
    system: FarmSystem,
    fmt: ReportFormat = ReportFormat.TEXT,
    stream: Optional[TextIO] = None
) -> None:
    """Write the rendered report to stream (stdout by default)."""
    print(render(system, fmt), file=stream or sys.stdout, flush=True)
