"""Pytest configuration and fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from sprite_frames import Frames, FramesConfig


def _random_image(width: int, height: int, seed: int = 0, opaque: bool = False) -> Image.Image:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    if opaque:
        pixels[..., 3] = 255
    return Image.fromarray(pixels)


class RecordingLoader:
    """Loader that serves registered images and records requested names."""

    def __init__(self, images: dict[str, Image.Image] | None = None, default: Image.Image | None = None):
        self.images = dict(images or {})
        self.default = default
        self.requested: list[str] = []

    def load_image(self, name):
        self.requested.append(str(name))
        if str(name) in self.images:
            return self.images[str(name)]
        if self.default is not None:
            return self.default
        raise FileNotFoundError(name)


@pytest.fixture
def make_image():
    """Factory for RGBA images filled with seeded random pixels."""
    return _random_image


@pytest.fixture
def pixels_of():
    """Get the RGBA pixels of an image as an array."""

    def _pixels_of(image: Image.Image) -> np.ndarray:
        return np.asarray(image.convert("RGBA"))

    return _pixels_of


@pytest.fixture
def make_loader():
    """Factory for recording loaders."""
    return RecordingLoader


@pytest.fixture
def frames() -> Frames:
    """Create a frames factory with an empty recording loader."""
    return Frames(loader=RecordingLoader())


@pytest.fixture
def nearest_frames() -> Frames:
    """Create a frames factory that rotates with nearest-neighbour sampling."""
    return Frames(loader=RecordingLoader(), config=FramesConfig(resample=Image.Resampling.NEAREST))


@pytest.fixture
def sheet() -> Image.Image:
    """Create a 4 frame strip of 8x6 frames."""
    return _random_image(32, 6, seed=1)


@pytest.fixture
def square() -> Image.Image:
    """Create an opaque 6x6 image."""
    return _random_image(6, 6, seed=2, opaque=True)


@pytest.fixture
def frame_files(tmp_path):
    """Write walk00.png .. walk09.png and return (directory, images)."""
    images = [_random_image(4, 3, seed=10 + i) for i in range(10)]
    for i, image in enumerate(images):
        image.save(tmp_path / f"walk{i:02d}.png")
    return tmp_path, images


@pytest.fixture
def file_frames(frame_files) -> Frames:
    """Create a frames factory that loads from the frame_files directory."""
    directory, _ = frame_files
    return Frames(config=FramesConfig(asset_path=directory))
