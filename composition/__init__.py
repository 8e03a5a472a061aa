from .aggregate import (
    total_area,
    frame_union,
    scale_about,
    scale_all_about,
)
from .scene import (
    Scene,
    default_scene,
    format_report,
)
from .config import (
    ReportConfig,
    PlotConfig,
    DriverConfig,
)
