"""Shared parsing helpers for config value normalization."""

from __future__ import annotations

from pathlib import Path


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def normalize_optional_path(value: object) -> Path | None:
    """Normalize an optional path-like value, mapping blanks to `None`."""

    text = normalize_optional_string(value)
    if text is None:
        return None
    return Path(text)
