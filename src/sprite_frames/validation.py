"""Argument checks shared by the animation types and the frames factory."""

from __future__ import annotations

from typing import Any, Sized


def check_not_none(value: Any, message: str) -> None:
    """Raise TypeError with message if value is None."""
    if value is None:
        raise TypeError(message)


def check_at_least(value: int, minimum: int, name: str) -> None:
    """Raise ValueError if value is less than minimum.

    Args:
        value: The value to check.
        minimum: Smallest accepted value.
        name: Argument name used in the error message.

    Raises:
        ValueError: If value < minimum.
    """
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}")


def check_not_empty(values: Sized, name: str) -> None:
    """Raise ValueError if values is empty."""
    if len(values) == 0:
        raise ValueError(f"{name} must not be empty")
