"""
Default settings for reports, plots and logging.

The driver builds a DriverConfig from its command line; library code takes
the individual config objects it needs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


# ---------------------------------------------------------------
# REPORT
# ---------------------------------------------------------------

REPORT_PRECISION = 1


# ---------------------------------------------------------------
# PLOTTING
# ---------------------------------------------------------------

PLOT_COLS = 4
PLOT_CELL_SIZE = (3.0, 3.0)
PLOT_DPI = 200

SHAPE_COLORS = {
    "Rectangle": (0.30, 0.55, 0.85),
    "Rubber": (0.90, 0.45, 0.25),
    "Polygon": (0.35, 0.70, 0.40),
}
FRAME_COLOR = (0.4, 0.4, 0.4)
UNION_FRAME_COLOR = (0.0, 0.0, 0.0)


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

LOG_LEVEL = "WARNING"
LOGGER_NAMESPACES = ("shapes", "composition", "plotting", "scale_shapes")


@dataclass(frozen=True)
class ReportConfig:
    precision: int = REPORT_PRECISION


@dataclass(frozen=True)
class PlotConfig:
    cols: int = PLOT_COLS
    figsize_per_cell: Tuple[float, float] = PLOT_CELL_SIZE
    dpi: int = PLOT_DPI
    draw_frames: bool = True


@dataclass(frozen=True)
class DriverConfig:
    report: ReportConfig = field(default_factory=ReportConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
    log_level: str = LOG_LEVEL
