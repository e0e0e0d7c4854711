"""The application window and the routing of its events to an Input."""

from __future__ import annotations

from blockcraft.input import Action

_KEY_UNKNOWN = -1

# Non-printable key symbols of the windowing library and their input codes.
_SPECIAL_KEYS = {
    0xFF1B: 256,  # escape
    0xFF0D: 257,  # enter
    0xFF09: 258,  # tab
    0xFF08: 259,  # backspace
    0xFF63: 260,  # insert
    0xFFFF: 261,  # delete
    0xFF53: 262,  # right
    0xFF51: 263,  # left
    0xFF54: 264,  # down
    0xFF52: 265,  # up
    0xFF55: 266,  # page up
    0xFF56: 267,  # page down
    0xFF50: 268,  # home
    0xFF57: 269,  # end
    0xFFE1: 340,  # left shift
    0xFFE3: 341,  # left control
    0xFFE9: 342,  # left alt
    0xFFE2: 344,  # right shift
    0xFFE4: 345,  # right control
    0xFFEA: 346,  # right alt
}
_FUNCTION_KEY_FIRST = 0xFFBE
_FUNCTION_KEY_CODE_FIRST = 290
_FUNCTION_KEY_COUNT = 12

_MOUSE_BUTTONS = {1: 0, 4: 1, 2: 2, 8: 3, 16: 4}


def _key_code(symbol):
    if ord("a") <= symbol <= ord("z"):
        return symbol - (ord("a") - ord("A"))
    if ord(" ") <= symbol <= ord("`"):
        return symbol
    if _FUNCTION_KEY_FIRST <= symbol < _FUNCTION_KEY_FIRST + _FUNCTION_KEY_COUNT:
        return _FUNCTION_KEY_CODE_FIRST + symbol - _FUNCTION_KEY_FIRST
    return _SPECIAL_KEYS.get(symbol, _KEY_UNKNOWN)


class Window:
    """An 800x600 window with a captured cursor that feeds an Input."""

    def __init__(self):
        self.width = 800
        self.height = 600
        self.title = "Default Window"
        self.is_visible = False
        self.handle = None
        self._input = None
        self._hooked = False
        self._close_requested = False
        self._cursor = [self.width / 2.0, self.height / 2.0]

    def initialize(self):
        """Open the window; raises RuntimeError if that is impossible."""
        try:
            import pyglet.window

            handle = pyglet.window.Window(
                width=self.width, height=self.height, caption=self.title, vsync=True
            )
        except Exception as exc:
            raise RuntimeError("could not create the window") from exc

        handle.set_exclusive_mouse(True)
        handle.push_handlers(on_close=self._on_close, on_resize=self._on_resize)
        self.handle = handle
        self._close_requested = False
        self._hooked = False
        if self._input is not None:
            self._hook_input()
        self.is_visible = True

    def set_input(self, input):
        """Send keyboard and mouse events to ``input`` from now on."""
        self._input = input
        if self.handle is not None:
            self._hook_input()

    def show(self):
        """Make the window visible."""
        if self.handle is not None:
            self.handle.set_visible(True)
        self.is_visible = True

    def hide(self):
        """Hide the window."""
        if self.handle is not None:
            self.handle.set_visible(False)
        self.is_visible = False

    def resize(self, width, height):
        """Record a new nominal size."""
        self.width = width
        self.height = height

    def window_size(self):
        """Return the current size as (width, height)."""
        if self.handle is not None:
            width, height = self.handle.get_size()
            return int(width), int(height)
        return self.width, self.height

    def should_close(self):
        """Return whether the user asked to close the window."""
        return self.handle is not None and self._close_requested

    def poll_events(self):
        """Process pending window events."""
        if self.handle is not None:
            self.handle.dispatch_events()

    def swap_buffers(self):
        """Show the frame that was just drawn."""
        if self.handle is not None:
            self.handle.flip()

    def shutdown(self):
        """Close the window; safe to call more than once."""
        if self.handle is not None:
            self.handle.close()
            self.handle = None
        self._hooked = False
        self.is_visible = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()

    def _hook_input(self):
        if self._hooked:
            return
        self.handle.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
        )
        self._hooked = True

    def _on_close(self):
        self._close_requested = True
        return True

    def _on_resize(self, width, height):
        from pyglet import gl

        framebuffer_width, framebuffer_height = self.handle.get_framebuffer_size()
        gl.glViewport(0, 0, framebuffer_width, framebuffer_height)
        return True

    def _on_key_press(self, symbol, modifiers):
        if self._input is not None:
            self._input.key_callback(_key_code(symbol), 0, Action.PRESS, modifiers)
        return True

    def _on_key_release(self, symbol, modifiers):
        if self._input is not None:
            self._input.key_callback(_key_code(symbol), 0, Action.RELEASE, modifiers)
        return True

    def _on_mouse_press(self, x, y, button, modifiers):
        code = _MOUSE_BUTTONS.get(button)
        if self._input is not None and code is not None:
            self._input.mouse_button_callback(code, Action.PRESS, modifiers)

    def _on_mouse_release(self, x, y, button, modifiers):
        code = _MOUSE_BUTTONS.get(button)
        if self._input is not None and code is not None:
            self._input.mouse_button_callback(code, Action.RELEASE, modifiers)

    def _on_mouse_motion(self, x, y, dx, dy):
        # The cursor is captured, so track an unbounded virtual position
        # with the vertical axis growing downwards.
        self._cursor[0] += dx
        self._cursor[1] -= dy
        if self._input is not None:
            self._input.mouse_position_callback(*self._cursor)

    def _on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self._on_mouse_motion(x, y, dx, dy)