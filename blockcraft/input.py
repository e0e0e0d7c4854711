"""Keyboard and mouse state tracking fed by window event callbacks."""

from __future__ import annotations

import enum

import numpy as np

KEY_LAST = 348
MOUSE_BUTTON_LAST = 7

KEY_A = 65
KEY_D = 68
KEY_S = 83
KEY_W = 87
KEY_ESCAPE = 256


class Action(enum.IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Input:
    """Current state of the keyboard, the mouse buttons and the cursor."""

    def __init__(self):
        self._keys = [False] * (KEY_LAST + 1)
        self._mouse_buttons = [False] * (MOUSE_BUTTON_LAST + 1)
        self._mouse_pos = np.zeros(2, dtype=np.float32)
        self._last_mouse_pos = np.zeros(2, dtype=np.float32)

    def is_key_pressed(self, key):
        """Return whether ``key`` is held; unknown keys are never held."""
        return 0 <= key <= KEY_LAST and self._keys[key]

    def is_mouse_button_pressed(self, button):
        """Return whether ``button`` is held; unknown buttons are never held."""
        return 0 <= button <= MOUSE_BUTTON_LAST and self._mouse_buttons[button]

    def mouse_position(self):
        """Return the last reported cursor position."""
        return self._mouse_pos.copy()

    def mouse_delta(self):
        """Return how far the cursor moved since the previous frame."""
        return self._mouse_pos - self._last_mouse_pos

    def key_callback(self, key, scancode, action, mods):
        """Record a key event."""
        if not 0 <= key <= KEY_LAST:
            return
        if action == Action.PRESS:
            self._keys[key] = True
        elif action == Action.RELEASE:
            self._keys[key] = False

    def mouse_button_callback(self, button, action, mods):
        """Record a mouse button event."""
        if not 0 <= button <= MOUSE_BUTTON_LAST:
            return
        if action == Action.PRESS:
            self._mouse_buttons[button] = True
        elif action == Action.RELEASE:
            self._mouse_buttons[button] = False

    def mouse_position_callback(self, xpos, ypos):
        """Record a cursor move."""
        new_pos = np.array([xpos, ypos], dtype=np.float32)
        # The very first report must not produce a jump from the origin.
        if self._last_mouse_pos.any():
            self._last_mouse_pos = self._mouse_pos
        else:
            self._last_mouse_pos = new_pos.copy()
        self._mouse_pos = new_pos

    def update(self):
        """Finish a frame: the cursor delta starts again from zero."""
        self._last_mouse_pos = self._mouse_pos.copy()