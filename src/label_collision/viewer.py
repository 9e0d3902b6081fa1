"""Interactive matplotlib window for stepping through seeds.

Keys (normal mode):
    Page Up / Page Down  next / previous seed (never below 1)
    h                    toggle hiding every label
    s                    type a seed, then Enter to jump or Escape to cancel
    Escape               close the window
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .config import DEFAULT_CONFIG, LayoutConfig
from .rendering import PillowRenderer, draw_scene
from .state import AppMode, AppState, InputEvent, Session

logger = logging.getLogger(__name__)

KeyAction = Tuple[InputEvent, Optional[str]]

KEY_BINDINGS: Dict[AppMode, Dict[str, InputEvent]] = {
    AppMode.NORMAL: {
        "pageup": InputEvent.INCREMENT_SEED,
        "pagedown": InputEvent.DECREMENT_SEED,
        "h": InputEvent.TOGGLE_HIDE,
        "s": InputEvent.ENTER_SEED_ENTRY,
    },
    AppMode.SEED_ENTRY: {
        "backspace": InputEvent.DELETE_DIGIT,
        "enter": InputEvent.CONFIRM_ENTRY,
        "return": InputEvent.CONFIRM_ENTRY,
        "escape": InputEvent.CANCEL_ENTRY,
    },
}
QUIT_KEY = "escape"


def event_for_key(mode: AppMode, key: Optional[str]) -> Optional[KeyAction]:
    """Translate a matplotlib key name into an input event for ``mode``."""

    if not key:
        return None
    if mode is AppMode.SEED_ENTRY and len(key) == 1 and key in "0123456789":
        return InputEvent.APPEND_DIGIT, key
    event = KEY_BINDINGS[mode].get(key)
    if event is None:
        return None
    return event, None


def _release_default_keymaps(plt) -> None:
    # matplotlib binds s (save), h (home) and others out of the box.
    taken = {key for bindings in KEY_BINDINGS.values() for key in bindings}
    taken.update("0123456789")
    taken.add(QUIT_KEY)
    for name, keys in list(plt.rcParams.items()):
        if name.startswith("keymap.") and isinstance(keys, list):
            plt.rcParams[name] = [key for key in keys if key not in taken]


class Viewer:
    """Binds a :class:`Session` to a matplotlib figure."""

    def __init__(self, session: Session) -> None:
        import matplotlib.pyplot as plt

        self._plt = plt
        self.session = session
        self.renderer = PillowRenderer(session.config.canvas_size)

        _release_default_keymaps(plt)
        width, height = session.config.canvas_size
        self.figure = plt.figure(figsize=(width / 100.0, height / 100.0), dpi=100)
        if self.figure.canvas.manager is not None:
            self.figure.canvas.manager.set_window_title("Collision Example")
        axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        axes.set_axis_off()
        self.image = axes.imshow(self._frame(), interpolation="nearest")
        self.figure.canvas.mpl_connect("key_press_event", self.on_key)

    def _frame(self):
        draw_scene(self.renderer, self.session.labels, self.session.state)
        return self.renderer.to_array()

    def on_key(self, event) -> None:
        mode = self.session.state.mode
        if mode is AppMode.NORMAL and event.key == QUIT_KEY:
            self._plt.close(self.figure)
            return
        action = event_for_key(mode, event.key)
        if action is None:
            return
        input_event, digit = action
        self.session.dispatch(input_event, digit)
        self.image.set_data(self._frame())
        self.figure.canvas.draw_idle()

    def show(self) -> None:
        self._plt.show()


def run_viewer(
    seed: int = 1,
    *,
    hide_all: bool = False,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> None:
    session = Session(AppState(seed=seed, hide_all=hide_all), config=config)
    logger.info("Opening viewer at seed %d", session.state.seed)
    Viewer(session).show()


__all__ = ["KEY_BINDINGS", "QUIT_KEY", "Viewer", "event_for_key", "run_viewer"]
