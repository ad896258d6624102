"""Per-type text normalization for screenplay elements."""

from __future__ import annotations

import re
from typing import Any

from screenwrite.models import ElementType

CONTINUATION_SUFFIX = "(CONT'D)"

# Base name, then an optional trailing continuation marker in any casing
_CHARACTER_SPLIT = re.compile(r"^(.*?)\s*(\(CONT'D\))?$", re.IGNORECASE | re.DOTALL)

_UPPERCASE_TYPES = frozenset({ElementType.SCENE_HEADING, ElementType.TRANSITION})


def split_character_name(text: str | None) -> tuple[str, str]:
    """Split a character cue into its base name and continuation suffix.

    Args:
        text: Cue text such as ``"bob (CONT'D)"``.

    Returns:
        Tuple of (base name, suffix). The base name is trimmed but keeps its
        casing; the suffix is ``""`` when absent and otherwise keeps the
        casing it was typed with.
    """
    trimmed = (text or "").strip()
    match = _CHARACTER_SPLIT.match(trimmed)
    if not match:
        return trimmed, ""
    return match.group(1).strip(), match.group(2) or ""


def base_character_name(text: str | None) -> str:
    """Return the uppercased cue name with any continuation suffix removed."""
    return split_character_name(text)[0].upper()


def _normalize_character(text: str) -> str:
    base, suffix = split_character_name(text)
    if not base:
        return text.upper()
    if suffix:
        return f"{base.upper()} {suffix}"
    return base.upper()


def _normalize_parenthetical(text: str) -> str:
    if len(text) >= 2 and text.startswith("(") and text.endswith(")"):
        return text
    core = text.lstrip("(").rstrip(")").strip()
    return f"({core})"


def normalize(element_type: Any, text: str | None) -> str:
    """Apply the formatting conventions of an element type to its text.

    Scene headings and transitions are uppercased, character cues have
    their name uppercased while the continuation suffix keeps its casing,
    parentheticals are wrapped in exactly one pair of parentheses, and
    everything else is only trimmed. Applying it twice gives the same
    result as applying it once.

    Args:
        element_type: Target element type; unknown values normalize as action.
        text: Raw text. ``None`` is treated as empty.

    Returns:
        The normalized text.
    """
    kind = ElementType.coerce(element_type)
    trimmed = (text or "").strip()

    if kind in _UPPERCASE_TYPES:
        return trimmed.upper()
    if kind is ElementType.CHARACTER:
        return _normalize_character(trimmed)
    if kind is ElementType.PARENTHETICAL:
        return _normalize_parenthetical(trimmed)
    return trimmed
