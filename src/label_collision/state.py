"""Application state record, mode transitions, and the recompute entry point.

The core holds no state between calls: the surrounding application owns an
:class:`AppState`, feeds it through the pure transition functions below, and
calls :func:`recompute` whenever the seed or the hide flag changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, LayoutConfig
from .core import Label, build_labels, resolve_collisions
from .markers import US_STATES, generate_markers

logger = logging.getLogger(__name__)


class InvalidTransition(ValueError):
    """Raised when a transition is requested from the wrong mode."""


class AppMode(enum.Enum):
    NORMAL = "normal"
    SEED_ENTRY = "seed_entry"


class InputEvent(enum.Enum):
    INCREMENT_SEED = "increment_seed"
    DECREMENT_SEED = "decrement_seed"
    TOGGLE_HIDE = "toggle_hide"
    ENTER_SEED_ENTRY = "enter_seed_entry"
    APPEND_DIGIT = "append_digit"
    DELETE_DIGIT = "delete_digit"
    CONFIRM_ENTRY = "confirm_entry"
    CANCEL_ENTRY = "cancel_entry"


@dataclass(frozen=True)
class AppState:
    seed: int = 1
    hide_all: bool = False
    mode: AppMode = AppMode.NORMAL
    seed_buffer: str = ""


def clamp_seed(seed: int) -> int:
    return max(1, seed)


def recompute(
    seed: int,
    canvas_size: Optional[Tuple[int, int]] = None,
    hide_all: bool = False,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[Label]:
    """Generate markers for ``seed`` and return the resolved label sequence."""

    if canvas_size is not None:
        config = config.with_canvas(canvas_size)
    markers, direction = generate_markers(
        seed,
        config.canvas_size,
        US_STATES,
        count=config.marker_count,
        marker_size=config.marker_dimensions,
    )
    labels = resolve_collisions(build_labels(markers, direction, hide_all=hide_all))
    logger.debug(
        "Recomputed seed=%d hide_all=%s direction=%s hidden=%d",
        seed,
        hide_all,
        direction.value,
        sum(1 for label in labels if label.hidden),
    )
    return labels


def _require_mode(state: AppState, mode: AppMode, action: str) -> None:
    if state.mode is not mode:
        raise InvalidTransition(f"cannot {action} in {state.mode.value} mode")


def increment_seed(state: AppState) -> AppState:
    _require_mode(state, AppMode.NORMAL, "increment seed")
    return replace(state, seed=state.seed + 1)


def decrement_seed(state: AppState) -> AppState:
    _require_mode(state, AppMode.NORMAL, "decrement seed")
    return replace(state, seed=clamp_seed(state.seed - 1))


def toggle_hide(state: AppState) -> AppState:
    _require_mode(state, AppMode.NORMAL, "toggle labels")
    return replace(state, hide_all=not state.hide_all)


def enter_seed_entry(state: AppState) -> AppState:
    _require_mode(state, AppMode.NORMAL, "enter seed entry")
    return replace(state, mode=AppMode.SEED_ENTRY, seed_buffer="")


def append_digit(state: AppState, digit: str) -> AppState:
    _require_mode(state, AppMode.SEED_ENTRY, "append digit")
    if len(digit) != 1 or digit not in "0123456789":
        raise ValueError(f"expected a single digit, got {digit!r}")
    return replace(state, seed_buffer=state.seed_buffer + digit)


def delete_digit(state: AppState) -> AppState:
    _require_mode(state, AppMode.SEED_ENTRY, "delete digit")
    return replace(state, seed_buffer=state.seed_buffer[:-1])


def confirm_entry(state: AppState) -> AppState:
    """Leave seed entry, jumping to the typed seed (empty buffer keeps the seed)."""

    _require_mode(state, AppMode.SEED_ENTRY, "confirm entry")
    seed = int(state.seed_buffer) if state.seed_buffer else state.seed
    return AppState(seed=clamp_seed(seed), hide_all=state.hide_all)


def cancel_entry(state: AppState) -> AppState:
    _require_mode(state, AppMode.SEED_ENTRY, "cancel entry")
    return AppState(seed=state.seed, hide_all=state.hide_all)


def apply_event(state: AppState, event: InputEvent, digit: Optional[str] = None) -> AppState:
    if event is InputEvent.APPEND_DIGIT:
        if digit is None:
            raise ValueError("APPEND_DIGIT requires a digit")
        return append_digit(state, digit)
    handlers = {
        InputEvent.INCREMENT_SEED: increment_seed,
        InputEvent.DECREMENT_SEED: decrement_seed,
        InputEvent.TOGGLE_HIDE: toggle_hide,
        InputEvent.ENTER_SEED_ENTRY: enter_seed_entry,
        InputEvent.DELETE_DIGIT: delete_digit,
        InputEvent.CONFIRM_ENTRY: confirm_entry,
        InputEvent.CANCEL_ENTRY: cancel_entry,
    }
    return handlers[event](state)


class Session:
    """Owns the current state and the resolved labels between events."""

    def __init__(
        self,
        state: Optional[AppState] = None,
        *,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> None:
        state = state or AppState()
        self.config = config
        self.state = replace(state, seed=clamp_seed(state.seed))
        self.labels: Tuple[Label, ...] = self._recompute()

    def _recompute(self) -> Tuple[Label, ...]:
        return tuple(recompute(self.state.seed, hide_all=self.state.hide_all, config=self.config))

    def dispatch(self, event: InputEvent, digit: Optional[str] = None) -> bool:
        """Apply ``event``; return ``True`` when the labels were regenerated."""

        previous = self.state
        self.state = apply_event(previous, event, digit)
        logger.debug("%s: %s -> %s", event.value, previous, self.state)

        changed = (
            event is InputEvent.CONFIRM_ENTRY
            or self.state.seed != previous.seed
            or self.state.hide_all != previous.hide_all
        )
        if changed:
            self.labels = self._recompute()
        return changed


__all__ = [
    "AppMode",
    "AppState",
    "InputEvent",
    "InvalidTransition",
    "Session",
    "apply_event",
    "append_digit",
    "cancel_entry",
    "clamp_seed",
    "confirm_entry",
    "decrement_seed",
    "delete_digit",
    "enter_seed_entry",
    "increment_seed",
    "recompute",
    "toggle_hide",
]
