"""label_collision package."""

from .api import render_seed_snapshots
from .config import DEFAULT_CONFIG, LayoutConfig
from .core import (
    AnchorDirection,
    Label,
    Marker,
    Rect,
    build_labels,
    combined_hitbox,
    label_box,
    marker_rect,
    resolve_collisions,
)
from .markers import US_STATES, anchor_direction_for_seed, generate_markers
from .rendering import PillowRenderer, Renderer, draw_scene, get_renderer
from .state import AppMode, AppState, InputEvent, InvalidTransition, Session, recompute

__all__ = [
	"AnchorDirection",
	"Rect",
	"Marker",
	"Label",
	"marker_rect",
	"label_box",
	"combined_hitbox",
	"build_labels",
	"resolve_collisions",
	"US_STATES",
	"anchor_direction_for_seed",
	"generate_markers",
	"AppMode",
	"AppState",
	"InputEvent",
	"InvalidTransition",
	"Session",
	"recompute",
	"Renderer",
	"PillowRenderer",
	"get_renderer",
	"draw_scene",
	"LayoutConfig",
	"DEFAULT_CONFIG",
	"render_seed_snapshots",
]
__version__ = "0.1.0"
