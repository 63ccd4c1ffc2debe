"""Image loading and caching."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from PIL import Image

logger = logging.getLogger(__name__)

ImageName = Union[str, os.PathLike]


class ImageLoader:
    """Loads and caches images by name."""

    def __init__(self, asset_path: Optional[Path] = None, cache: bool = True):
        """Initialize the image loader.

        Args:
            asset_path: Base path that relative image names resolve against.
            cache: Whether loaded images are kept and reused.
        """
        self._asset_path = Path(asset_path) if asset_path is not None else Path(".")
        self._cache_enabled = cache
        self._cache: dict[str, Image.Image] = {}

    @property
    def asset_path(self) -> Path:
        """Base path for relative image names."""
        return self._asset_path

    def resolve(self, name: ImageName) -> Path:
        """Resolve an image name to a path.

        Args:
            name: Image file name, relative to the asset path, or absolute.

        Returns:
            Path of the image file.
        """
        path = Path(name)
        if path.is_absolute():
            return path
        return self._asset_path / path

    def load_image(self, name: ImageName) -> Image.Image:
        """Load an image by name.

        Args:
            name: Image file name.

        Returns:
            The loaded image, with its pixel data read.

        Raises:
            FileNotFoundError: If the file does not exist.
            PIL.UnidentifiedImageError: If the file is not a readable image.
        """
        key = os.fspath(name)
        if key in self._cache:
            return self._cache[key]

        path = self.resolve(name)
        with Image.open(path) as img:
            img.load()
            # Detach from the file handle
            image = img.copy()
        logger.debug("Loaded image %s (%dx%d, %s)", path, image.width, image.height, image.mode)

        if self._cache_enabled:
            self._cache[key] = image
        return image

    def register(self, name: ImageName, image: Image.Image) -> None:
        """Register an already loaded image under a name.

        Args:
            name: The name later passed to load_image.
            image: The image to return for that name.
        """
        self._cache[os.fspath(name)] = image

    def get(self, name: ImageName) -> Optional[Image.Image]:
        """Get an image from cache.

        Args:
            name: Image file name.

        Returns:
            The cached image or None.
        """
        return self._cache.get(os.fspath(name))

    def clear(self) -> None:
        """Drop all cached images."""
        self._cache.clear()
