"""Frame-by-frame sprite animations advanced on a timer."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .geometry import Vector2

__all__ = ["DelayAnimation", "AnimationFrame"]


@dataclass
class DelayAnimation:
    """A restartable timer measuring seconds since it was started."""

    duration: float = 0.0
    clock: Callable[[], float] = time.monotonic
    started: bool = False
    _start_time: float = field(default=0.0, repr=False)

    def reset(self) -> None:
        """Allow the next ``start`` to restart the timer."""
        self.started = False

    def start(self) -> None:
        """Start the timer unless it is already running."""
        if not self.started:
            self.started = True
            self._start_time = self.clock()

    def is_time_elapsed(self) -> bool:
        """Whether at least ``duration`` seconds have passed since the start."""
        return self.clock() - self._start_time >= self.duration


@dataclass
class AnimationFrame:
    """Named sequences of sprite-sheet positions, cycled on a delay."""

    delay: DelayAnimation = field(default_factory=DelayAnimation)
    current_animation: str = ""
    frame: int = 0
    animations: dict[str, list[Vector2]] = field(default_factory=dict)

    def add_animation(self, name: str, frames: Iterable[Vector2]) -> None:
        self.animations[name] = list(frames)

    def get_animations(self, name: str) -> list[Vector2]:
        """The frames of an animation, or an empty list if there is none."""
        return list(self.animations.get(name, []))

    def update_animation(self) -> None:
        """Advance one frame once the delay has passed."""
        self.delay.start()
        if self.delay.is_time_elapsed():
            self.delay.reset()
            self.change_frame()

    def change_frame(self) -> None:
        """Step to the next frame, wrapping at the end."""
        self.frame += 1
        if self.frame > len(self.animations.get(self.current_animation, [])) - 1:
            self.frame = 0

    def current_frame(self) -> Vector2:
        """The position of the current frame; the origin when there are no frames."""
        frames = self.animations.get(self.current_animation, [])
        if not frames:
            return Vector2()
        f = frames[self.frame]
        return Vector2(f.x, f.y)

    def change_animation(self, name: str) -> None:
        """Switch to another animation, restarting it from its first frame."""
        if self.current_animation != name:
            self.current_animation = name
            self.frame = 0