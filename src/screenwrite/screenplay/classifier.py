"""Element type inference for free-typed screenplay text."""

from __future__ import annotations

import re
from typing import Any

from screenwrite.models import ElementType

# Matched against the uppercased text so "int. kitchen" is still a heading
SCENE_HEADING_PATTERN = re.compile(r"^(INT|EXT|INT/EXT|I/E)[\s.]")
TRANSITION_PATTERN = re.compile(r"[A-Z\s]+TO:")
CHARACTER_PATTERN = re.compile(r"[A-Z][A-Z\s']+(?:\s*\((?i:CONT'D)\))?")
PARENTHETICAL_PATTERN = re.compile(r"\(.+\)")

# Element types whose successor absorbs unmatched text as dialogue
DIALOGUE_CONTEXT = frozenset(
    {
        ElementType.CHARACTER,
        ElementType.PARENTHETICAL,
        ElementType.DIALOGUE,
    }
)


def is_scene_heading(text: str) -> bool:
    """Check for an INT/EXT/INT/EXT/I/E prefix followed by a separator."""
    return bool(SCENE_HEADING_PATTERN.match(text.upper()))


def is_transition(text: str) -> bool:
    """Check for an all-caps line ending in ``TO:`` (e.g. ``CUT TO:``)."""
    return bool(TRANSITION_PATTERN.fullmatch(text))


def is_character_cue(text: str) -> bool:
    """Check for an all-caps name, optionally followed by ``(CONT'D)``."""
    return bool(CHARACTER_PATTERN.fullmatch(text))


def is_parenthetical(text: str) -> bool:
    """Check for text fully wrapped in parentheses."""
    return bool(PARENTHETICAL_PATTERN.fullmatch(text))


def classify(text: str | None, previous_type: Any = None) -> ElementType:
    """Infer the element type of a block of text.

    Rules are tried in priority order and the first match wins: scene
    heading, transition, character cue, parenthetical, dialogue (when the
    previous element is part of a speech) and finally action.

    A character cue is never inferred directly after another character
    cue; otherwise a freshly created cue would keep reclassifying the
    line the user types under it.

    Args:
        text: Raw text typed by the user. ``None`` is treated as empty.
        previous_type: Type of the preceding element, if any. Strings are
            accepted and coerced; unknown values count as action.

    Returns:
        The inferred element type.
    """
    text = text or ""
    previous = ElementType.coerce(previous_type) if previous_type else None

    if is_scene_heading(text):
        return ElementType.SCENE_HEADING

    if is_transition(text):
        return ElementType.TRANSITION

    if is_character_cue(text) and previous is not ElementType.CHARACTER:
        return ElementType.CHARACTER

    if is_parenthetical(text):
        return ElementType.PARENTHETICAL

    if previous in DIALOGUE_CONTEXT:
        return ElementType.DIALOGUE

    return ElementType.ACTION
