"""Frame driver - owned scheduler for per-frame simulation callbacks.

The host loop (a pygame clock ticking at the display rate) calls
run_frame() once per refresh. The driver only does work while started:
one simulation step followed by one render pass. Games start it when a
session enters play and stop it when the session leaves play, so no
stray updates happen after a game has ended.

Usage:
    driver = FrameDriver(step=game.update, render=game.render_frame)
    driver.start()

    while running:
        clock.tick(60)
        driver.run_frame()
"""

from typing import Callable

from arcadekit.logging import get_logger

log = get_logger('frame_driver')


class FrameDriver:
    """Runs one step + one render per frame while started."""

    def __init__(
        self,
        step: Callable[[], None],
        render: Callable[[], None],
    ):
        """Initialize driver (stopped).

        Args:
            step: Advances the simulation by exactly one frame
            render: Draws the state produced by the step
        """
        self._step = step
        self._render = render
        self._running = False
        self._frame_count = 0

    @property
    def is_running(self) -> bool:
        """Check if the driver is scheduling frames."""
        return self._running

    @property
    def frame_count(self) -> int:
        """Frames run since the last start()."""
        return self._frame_count

    def start(self) -> None:
        """Begin scheduling frames. Starting a running driver does nothing."""
        if self._running:
            return
        self._running = True
        self._frame_count = 0
        log.debug("Frame driver started")

    def stop(self) -> None:
        """Cancel scheduling. Stopping a stopped driver does nothing."""
        if not self._running:
            return
        self._running = False
        log.debug("Frame driver stopped after %d frames", self._frame_count)

    def run_frame(self) -> bool:
        """Run one frame if started.

        The step may stop the driver (e.g. the game ended); the render for
        that frame still runs so the final state is drawn.

        Returns:
            True if a frame was run, False if the driver is stopped
        """
        if not self._running:
            return False

        self._step()
        self._render()
        self._frame_count += 1
        return True
