from .vectorizer import (
    shape_to_shapely,
    draw_scene_on_axis,
    save_scene_as_svg,
    save_scene_as_png,
)
from .renderer import render_history_grid
