"""Sprite frame animations built from images and sprite sheets."""

from __future__ import annotations

from .animation import (
    Animation,
    SingleFrameAnimation,
    MultipleFramesAnimation,
    LoopedFramesAnimation,
)
from .config import FramesConfig
from .frames import Frames, frame_number_width
from .image_loader import ImageLoader

__version__ = "0.1.0"

__all__ = [
    "Animation",
    "SingleFrameAnimation",
    "MultipleFramesAnimation",
    "LoopedFramesAnimation",
    "FramesConfig",
    "Frames",
    "frame_number_width",
    "ImageLoader",
]
