"""Rendering helpers for the nature scroll scene."""

from .assets import (
    SurfaceCache,
    get_text_surface,
    load_font,
)
from .compositor import (
    DEFAULT_LAYERS,
    Compositor,
    LayerSpec,
    default_layers,
    render_scene,
)
from .landscape import (
    draw_clouds,
    draw_far_hills,
    draw_flowers,
    draw_mid_hills,
    draw_near_ground,
    draw_trees,
)
from .particles import draw_particles
from .sky import draw_sky, draw_stars
from .symbols import ICON_DRAWERS, draw_symbols
from .ui import (
    Button,
    ButtonVisualStyle,
    build_text_panel,
)

__all__ = [
    "Button",
    "ButtonVisualStyle",
    "Compositor",
    "DEFAULT_LAYERS",
    "ICON_DRAWERS",
    "LayerSpec",
    "SurfaceCache",
    "build_text_panel",
    "default_layers",
    "draw_clouds",
    "draw_far_hills",
    "draw_flowers",
    "draw_mid_hills",
    "draw_near_ground",
    "draw_particles",
    "draw_sky",
    "draw_stars",
    "draw_symbols",
    "draw_trees",
    "get_text_surface",
    "load_font",
    "render_scene",
]
