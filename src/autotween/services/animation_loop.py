"""
AnimationLoop - asyncio frame driver for an AnimationScheduler.

Calls scheduler.tick(dt) at a target rate with the real elapsed time between
frames. Animations cap each step themselves (max_delta), so a stalled event
loop slows animations down instead of making them jump.

Supports pause/step/FPS control for debugging, same as a render loop.
"""

from __future__ import annotations
import asyncio
import time
from collections import deque
from typing import Deque, Dict, Optional

from autotween.engine.scheduler import AnimationScheduler
from autotween.models.enums import LogCategory
from autotween.utils.logger import get_category_logger

log = get_category_logger(LogCategory.LOOP)


class AnimationLoop:
    """
    Periodic ticker for a scheduler.

    Example:
        loop = AnimationLoop(scheduler, fps=60)
        await loop.start()
        ...
        await loop.stop()
    """

    def __init__(self, scheduler: AnimationScheduler, fps: Optional[int] = None):
        """
        Args:
            scheduler: Scheduler to advance each frame
            fps: Target tick frequency (1-240); the scheduler config fps when None
        """
        self.scheduler = scheduler
        if fps is None:
            fps = scheduler.config.fps
        self.fps = max(1, min(fps, 240))

        # Runtime state
        self.running = False
        self.paused = False
        self.step_requested = False
        self.loop_task: Optional[asyncio.Task] = None

        # Timing & metrics
        self.last_tick_time = time.perf_counter()
        self.frame_times: Deque[float] = deque(maxlen=300)  # Last 5 seconds @ 60 FPS
        self.frames_ticked = 0
        self.tick_errors = 0

    # === Control API ===

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def step_frame(self) -> None: self.step_requested = True

    def set_fps(self, fps: int) -> None:
        """Change FPS at runtime."""
        self.fps = max(1, min(fps, 240))
        log.info("AnimationLoop FPS changed", fps=self.fps)

    # === Lifecycle ===

    async def start(self) -> None:
        """Start the tick loop."""
        if self.running:
            log.warn("AnimationLoop already running")
            return

        self.running = True
        self.last_tick_time = time.perf_counter()
        self.loop_task = asyncio.create_task(self._tick_loop())
        log.info("AnimationLoop started", fps=self.fps)

    async def stop(self) -> None:
        """Stop the tick loop."""
        if not self.running:
            return
        self.running = False
        if self.loop_task:
            self.loop_task.cancel()
            try:
                await self.loop_task
            except asyncio.CancelledError:
                pass
            self.loop_task = None

        log.info(
            "AnimationLoop stopped",
            frames_ticked=self.frames_ticked,
            tick_errors=self.tick_errors,
        )

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Get measured FPS over recent frames."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return len(self.frame_times) / duration

    def get_metrics(self) -> Dict:
        return {
            "fps_target": self.fps,
            "fps_actual": self.get_actual_fps(),
            "frames_ticked": self.frames_ticked,
            "tick_errors": self.tick_errors,
            "live_animations": len(self.scheduler),
        }

    # === Core Loop ===

    def tick_once(self) -> float:
        """
        Run one tick with the real time since the previous one.

        Returns:
            The dt passed to the scheduler
        """
        now = time.perf_counter()
        dt = now - self.last_tick_time
        self.last_tick_time = now

        self.scheduler.tick(dt)
        self.frames_ticked += 1
        self.frame_times.append(now)
        return dt

    async def _tick_loop(self) -> None:
        frame_delay = 1.0 / self.fps

        log.debug("Tick loop running", fps=self.fps, delay_ms=f"{frame_delay * 1000:.2f}")

        while self.running:
            if self.paused and not self.step_requested:
                await asyncio.sleep(0.01)
                # Don't bank paused time into the next dt
                self.last_tick_time = time.perf_counter()
                continue

            try:
                self.tick_once()
            except Exception as e:
                # Logged and counted, the loop keeps running
                self.tick_errors += 1
                log.error("Tick error", error=str(e), error_type=type(e).__name__)

            self.step_requested = False
            frame_delay = 1.0 / self.fps
            await asyncio.sleep(frame_delay)

    def __repr__(self) -> str:
        return f"AnimationLoop(fps={self.fps}, running={self.running}, frames={self.frames_ticked})"
