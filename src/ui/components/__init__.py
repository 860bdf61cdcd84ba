from .river_chart import build_river_figure, render_river_chart

__all__ = [
    "build_river_figure",
    "render_river_chart",
]
