"""The game loop tying the window, input, camera and renderer together."""

from __future__ import annotations

import sys
import time

from blockcraft.camera import Camera
from blockcraft.input import KEY_ESCAPE, Input
from blockcraft.renderer import Renderer
from blockcraft.shader import ShaderError
from blockcraft.window import Window


class Game:
    """Owns every subsystem and runs frames until asked to stop."""

    def __init__(self):
        self.is_running = False
        self.window = None
        self.input = None
        self.renderer = None
        self.camera = None

    def initialize(self):
        """Open the window and load everything; raises if any part fails."""
        self.input = Input()
        self.window = Window()
        self.renderer = Renderer()

        self.window.initialize()

        width, height = self.window.window_size()
        self.camera = Camera(45.0, width / height, 0.1, 100.0)

        self.window.set_input(self.input)
        self.window.handle.switch_to()

        from pyglet import gl

        gl.glViewport(0, 0, self.window.width, self.window.height)

        self.renderer.initialize()
        self.is_running = True

    def shutdown(self):
        """Ask the loop to stop after the current frame."""
        self.is_running = False

    def run(self):
        """Run frames until the window closes or the game is shut down."""
        if self.window is None or self.camera is None:
            raise RuntimeError("game is not initialized")

        last_time = time.perf_counter()
        while not self.window.should_close() and self.is_running:
            current_time = time.perf_counter()
            delta_time = current_time - last_time
            last_time = current_time

            self.window.poll_events()

            if self.input.is_key_pressed(KEY_ESCAPE):
                self.shutdown()

            self.renderer.render(self.camera.view_proj_matrix())

            self.camera.update(self.input, delta_time)
            self.input.update()

            self.window.swap_buffers()

    def _release(self):
        if self.renderer is not None:
            self.renderer.shutdown()
        if self.window is not None:
            self.window.shutdown()


def main(argv=None):
    """Start the game; returns the process exit status."""
    game = Game()
    try:
        try:
            game.initialize()
        except (RuntimeError, OSError, ShaderError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return -1
        game.run()
        return 0
    finally:
        game._release()


if __name__ == "__main__":
    sys.exit(main())