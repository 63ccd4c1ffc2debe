"""Factory for frame lists, sprite sheets and animations."""

from __future__ import annotations

import logging
import os
from typing import Optional, Protocol, Sequence, Union

import numpy as np
from PIL import Image

from .animation import LoopedFramesAnimation, MultipleFramesAnimation, SingleFrameAnimation
from .config import FramesConfig
from .image_loader import ImageLoader, ImageName
from .validation import check_at_least, check_not_empty, check_not_none

logger = logging.getLogger(__name__)

ImageSource = Union[Image.Image, str, os.PathLike]
FrameList = tuple[Image.Image, ...]


class Loader(Protocol):
    """Anything that can turn an image name into an image."""

    def load_image(self, name: ImageName) -> Image.Image:
        ...


def frame_number_width(frames: int, natural: bool = False) -> int:
    """Get the zero-padded width of frame numbers in numbered file names.

    The default is the legacy frames // 10 + 1, which gives 2 digits for
    10 frames (image00.png .. image09.png). Existing numbered asset sets
    are named this way.

    Args:
        frames: Number of frames.
        natural: Use the digit count of the last frame index instead.

    Returns:
        Number of digits.
    """
    if natural:
        return len(str(max(frames - 1, 0)))
    return frames // 10 + 1


def _frame_sequence(images: Sequence, name: str) -> FrameList:
    """Accept images either as separate arguments or as one list or tuple."""
    if len(images) == 1:
        check_not_none(images[0], f"{name} must not be None")
        if isinstance(images[0], (list, tuple)):
            return tuple(images[0])
    return tuple(images)


class Frames:
    """Creates frame lists, sprite sheets and animations from images.

    Arguments named image accept either a loaded image or an image name;
    names are resolved through the loader.
    """

    def __init__(self, loader: Optional[Loader] = None, config: Optional[FramesConfig] = None):
        """Initialize the factory.

        Args:
            loader: Loader for image names. Defaults to an ImageLoader
                built from config.
            config: Factory configuration.
        """
        self.config = config if config is not None else FramesConfig()
        if loader is None:
            loader = ImageLoader(self.config.asset_path, cache=self.config.cache_images)
        self.loader = loader

    def _resolve(self, image: ImageSource, name: str = "image") -> Image.Image:
        check_not_none(image, f"{name} must not be None")
        if isinstance(image, (str, os.PathLike)):
            return self.loader.load_image(image)
        return image

    # Animations

    def create_animation(self, image: ImageSource) -> SingleFrameAnimation:
        """Create a single frame animation."""
        return SingleFrameAnimation(self._resolve(image))

    def create_animation_from_files(self, image_name: str, suffix: str, frames: int) -> MultipleFramesAnimation:
        """Create a play-once animation from numbered image files."""
        return MultipleFramesAnimation(self.create_frame_list_from_files(image_name, suffix, frames))

    def create_looped_animation_from_files(self, image_name: str, suffix: str, frames: int) -> LoopedFramesAnimation:
        """Create a looped animation from numbered image files."""
        return LoopedFramesAnimation(self.create_frame_list_from_files(image_name, suffix, frames))

    def create_animation_from_sheet(
        self,
        image: ImageSource,
        x: int,
        y: int,
        width: int,
        height: int,
        frames: int,
    ) -> MultipleFramesAnimation:
        """Create a play-once animation from a horizontal strip in a sprite sheet."""
        return MultipleFramesAnimation(self.create_frame_list(image, x, y, width, height, frames))

    def create_looped_animation_from_sheet(
        self,
        image: ImageSource,
        x: int,
        y: int,
        width: int,
        height: int,
        frames: int,
    ) -> LoopedFramesAnimation:
        """Create a looped animation from a horizontal strip in a sprite sheet."""
        return LoopedFramesAnimation(self.create_frame_list(image, x, y, width, height, frames))

    def create_frames_animation(self, *images: Image.Image) -> MultipleFramesAnimation:
        """Create a play-once animation from images or a list of images."""
        return MultipleFramesAnimation(_frame_sequence(images, "images"))

    def create_looped_frames_animation(self, *images: Image.Image) -> LoopedFramesAnimation:
        """Create a looped animation from images or a list of images."""
        return LoopedFramesAnimation(_frame_sequence(images, "images"))

    # Frame lists

    def create_frame_list_from_files(self, image_name: str, suffix: str, frames: int) -> FrameList:
        """Load a frame list from numbered image files.

        Frame files are named image_name + zero-padded index + suffix, e.g.
        walk00.png through walk11.png for 12 frames.

        Args:
            image_name: File name prefix.
            suffix: File name suffix, including the extension.
            frames: Number of frames.

        Returns:
            Tuple of loaded frames.

        Raises:
            TypeError: If image_name or suffix is None.
            ValueError: If frames is less than 1.
        """
        check_not_none(image_name, "image_name must not be None")
        check_not_none(suffix, "suffix must not be None")
        check_at_least(frames, 1, "frames")

        width = frame_number_width(frames, natural=self.config.natural_frame_numbers)
        images = tuple(
            self.loader.load_image(f"{image_name}{frame:0{width}d}{suffix}")
            for frame in range(frames)
        )
        logger.debug("Loaded %d frames from %s*%s", frames, image_name, suffix)
        return images

    def create_frame_list(
        self,
        image: ImageSource,
        x: int,
        y: int,
        width: int,
        height: int,
        frames: int,
    ) -> FrameList:
        """Slice a frame list out of a sprite sheet.

        Frames are width x height regions laid out left to right, the first
        one at (x, y). The strip does not wrap to the next row.

        Args:
            image: Sprite sheet image or name.
            x: Left edge of the first frame.
            y: Top edge of the strip.
            width: Frame width.
            height: Frame height.
            frames: Number of frames.

        Returns:
            Tuple of frames, each a copy of its region.

        Raises:
            TypeError: If image is None.
            ValueError: If an argument is out of range or the strip does
                not fit inside the image.
        """
        check_not_none(image, "image must not be None")
        check_at_least(x, 0, "x")
        check_at_least(y, 0, "y")
        check_at_least(width, 0, "width")
        check_at_least(height, 0, "height")
        check_at_least(frames, 1, "frames")
        if width == 0 or height == 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")

        sheet = self._resolve(image)
        right = x + frames * width
        bottom = y + height
        if right > sheet.width or bottom > sheet.height:
            raise ValueError(
                f"{frames} frames of {width}x{height} at ({x}, {y}) "
                f"do not fit in a {sheet.width}x{sheet.height} image"
            )

        images = tuple(
            sheet.crop((x + frame * width, y, x + (frame + 1) * width, bottom))
            for frame in range(frames)
        )
        logger.debug("Sliced %d frames of %dx%d at (%d, %d)", frames, width, height, x, y)
        return images

    # Sprite sheets

    def create_sprite_sheet(self, *frame_images: Image.Image) -> Image.Image:
        """Compose frames into a horizontal sprite sheet.

        Every cell is as wide as the widest frame and as tall as the
        tallest; each frame is centered in its cell on a transparent
        background.

        Args:
            frame_images: Frames, or a single list of frames.

        Returns:
            The RGBA sprite sheet.

        Raises:
            ValueError: If there are no frames.
        """
        frame_list = _frame_sequence(frame_images, "frame_images")
        check_not_empty(frame_list, "frame_images")

        width = max(frame.width for frame in frame_list)
        height = max(frame.height for frame in frame_list)
        sprite_sheet = Image.new("RGBA", (width * len(frame_list), height), (0, 0, 0, 0))
        for i, frame in enumerate(frame_list):
            x = width * i + (width // 2) - (frame.width // 2)
            y = (height // 2) - (frame.height // 2)
            sprite_sheet.alpha_composite(frame.convert("RGBA"), dest=(x, y))

        logger.debug("Composed sprite sheet of %d frames, cell %dx%d", len(frame_list), width, height)
        return sprite_sheet

    def create_sprite_sheet_from_files(self, image_name: str, suffix: str, frames: int) -> Image.Image:
        """Compose numbered image files into a horizontal sprite sheet."""
        return self.create_sprite_sheet(self.create_frame_list_from_files(image_name, suffix, frames))

    # Transforms

    def flip_horizontally(self, image: Image.Image) -> Image.Image:
        """Mirror an image left to right, as a new RGBA image."""
        check_not_none(image, "image must not be None")
        pixels = np.asarray(image.convert("RGBA"))
        return Image.fromarray(np.ascontiguousarray(pixels[:, ::-1]))

    def flip_vertically(self, image: Image.Image) -> Image.Image:
        """Mirror an image top to bottom, as a new RGBA image."""
        check_not_none(image, "image must not be None")
        pixels = np.asarray(image.convert("RGBA"))
        return Image.fromarray(np.ascontiguousarray(pixels[::-1]))

    def flip_frames_horizontally(self, *frame_images: Image.Image) -> FrameList:
        """Mirror each frame left to right, keeping frame order."""
        return tuple(self.flip_horizontally(frame) for frame in _frame_sequence(frame_images, "frame_images"))

    def flip_frames_vertically(self, *frame_images: Image.Image) -> FrameList:
        """Mirror each frame top to bottom, keeping frame order."""
        return tuple(self.flip_vertically(frame) for frame in _frame_sequence(frame_images, "frame_images"))

    def rotate(self, image: ImageSource, steps: int) -> FrameList:
        """Create a full turn of rotated frames from an image.

        Frame k is the image rotated clockwise by k * 360 / steps degrees
        about its own center, in a square cell as wide as the larger image
        dimension. The image sits at the top-left of the cell; rotated
        pixels outside the cell are clipped.

        Args:
            image: Image or image name.
            steps: Number of frames in the turn.

        Returns:
            Tuple of steps square RGBA frames.

        Raises:
            TypeError: If image is None.
            ValueError: If steps is less than 1.
        """
        check_not_none(image, "image must not be None")
        check_at_least(steps, 1, "steps")

        source = self._resolve(image).convert("RGBA")
        width, height = source.size
        size = max(width, height)
        center = (width / 2.0, height / 2.0)
        step_angle = 360.0 / steps

        cell = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        cell.paste(source, (0, 0))

        sprite_sheet = Image.new("RGBA", (size * steps, size), (0, 0, 0, 0))
        for i in range(steps):
            if i == 0:
                rotated = cell
            else:
                # PIL rotates counter-clockwise for positive angles
                rotated = cell.rotate(-i * step_angle, resample=self.config.resample, center=center)
            sprite_sheet.paste(rotated, (size * i, 0))

        logger.debug("Rotated %dx%d image in %d steps", width, height, steps)
        return self.create_frame_list(sprite_sheet, 0, 0, size, size, steps)
