"""Theme definitions for component diagrams."""

from blazor_graph.themes.classic import CLASSIC_THEME
from blazor_graph.themes.light import LIGHT_THEME

THEMES = {
    "classic": CLASSIC_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "CLASSIC_THEME", "LIGHT_THEME"]
