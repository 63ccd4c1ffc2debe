"""Animation types: a cursor over an ordered list of frame images."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from PIL import Image

from .validation import check_not_empty, check_not_none


class Animation(ABC):
    """One or more frames in an animation.

    The host calls advance() once per tick and draws current_frame.
    """

    @abstractmethod
    def advance(self) -> bool:
        """Move to the next frame.

        Returns:
            True if the animation moved, False if it cannot move any more.
        """

    @property
    @abstractmethod
    def current_frame(self) -> Image.Image:
        """The frame at the current position."""


class SingleFrameAnimation(Animation):
    """Animation of a single, unchanging frame."""

    def __init__(self, frame: Image.Image):
        check_not_none(frame, "frame must not be None")
        self._frame = frame

    def advance(self) -> bool:
        return False

    @property
    def current_frame(self) -> Image.Image:
        return self._frame

    def __repr__(self) -> str:
        return f"SingleFrameAnimation(size={self._frame.size})"


class _FramesAnimation(Animation):
    """Base for animations over a copied, non-empty tuple of frames."""

    def __init__(self, frames: Iterable[Image.Image]):
        check_not_none(frames, "frames must not be None")
        self._frames = tuple(frames)
        check_not_empty(self._frames, "frames")
        self._index = 0

    @property
    def current_frame(self) -> Image.Image:
        return self._frames[self._index]

    @property
    def index(self) -> int:
        """Index of the current frame."""
        return self._index

    @property
    def frames(self) -> tuple[Image.Image, ...]:
        """The frames of this animation, in order."""
        return self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(frames={len(self._frames)}, index={self._index})"


class MultipleFramesAnimation(_FramesAnimation):
    """Plays its frames once and stops on the last one."""

    def advance(self) -> bool:
        if self._index == len(self._frames) - 1:
            return False
        self._index += 1
        return True


class LoopedFramesAnimation(_FramesAnimation):
    """Plays its frames in a loop, wrapping back to the first frame."""

    def advance(self) -> bool:
        self._index += 1
        if self._index == len(self._frames):
            self._index = 0
        return True
