"""Configuration for the frames factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image


@dataclass
class FramesConfig:
    """Configuration for frame list and sprite sheet creation."""

    # Base directory for relative image names
    asset_path: Path = field(default_factory=lambda: Path("."))
    cache_images: bool = True

    # Resampling filter used when rotating frames
    resample: Image.Resampling = Image.Resampling.BILINEAR

    # Zero-pad numbered files by the digit count of the last index instead
    # of the legacy frames // 10 + 1 width
    natural_frame_numbers: bool = False

    def __post_init__(self):
        if isinstance(self.asset_path, str):
            self.asset_path = Path(self.asset_path)
