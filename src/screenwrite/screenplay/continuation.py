"""Character continuation ("CONT'D") inference.

A character cue carries a ``(CONT'D)`` suffix when the same character
spoke earlier in the scene and an action line interrupted the speech
before they resume. Pure dialogue or parentheticals between two cues of
the same character do not count as an interruption, and a scene heading
or transition always severs continuation.

The suffix is derived state: it is never stored as a flag and is
recomputed from the element sequence after every change.
"""

from __future__ import annotations

from collections.abc import Sequence

from screenwrite.config import get_logger
from screenwrite.models import Element, ElementType
from screenwrite.screenplay.normalizer import (
    CONTINUATION_SUFFIX,
    base_character_name,
    split_character_name,
)

logger = get_logger(__name__)

SCENE_BOUNDARIES = frozenset({ElementType.SCENE_HEADING, ElementType.TRANSITION})


def should_continue(
    base_name: str | None, insertion_index: int, elements: Sequence[Element]
) -> bool:
    """Decide whether a cue at ``insertion_index`` continues earlier speech.

    Scans backward from the element before ``insertion_index`` for the most
    recent character cue, stopping at scene boundaries.

    Args:
        base_name: Name of the character being placed; a suffix, if
            present, is ignored and the comparison is case-insensitive.
        insertion_index: Position the cue occupies (or will occupy).
        elements: The element sequence.

    Returns:
        True when the previous cue in the scene belongs to the same
        character and at least one action element lies between it and
        ``insertion_index``. Invalid input yields False.
    """
    target = base_character_name(base_name)
    if not target or not elements:
        return False
    if insertion_index < 1 or insertion_index > len(elements):
        logger.debug(
            "Continuation index out of range",
            index=insertion_index,
            length=len(elements),
        )
        return False

    for i in range(insertion_index - 1, -1, -1):
        kind = elements[i].type
        if kind in SCENE_BOUNDARIES:
            return False
        if kind is not ElementType.CHARACTER:
            continue
        if base_character_name(elements[i].text) != target:
            return False
        return any(
            element.type is ElementType.ACTION
            for element in elements[i + 1 : insertion_index]
        )

    return False


def apply_continuation(
    text: str | None, index: int, elements: Sequence[Element]
) -> str:
    """Return the cue text with the continuation suffix added or removed.

    Args:
        text: Current cue text, with or without a suffix.
        index: Position of the cue in ``elements``.
        elements: The element sequence.

    Returns:
        The base name, followed by `` (CONT'D)`` when the cue continues.
    """
    base, _ = split_character_name(text)
    if should_continue(base, index, elements):
        return f"{base} {CONTINUATION_SUFFIX}"
    return base


def resolve_continuations(elements: Sequence[Element]) -> list[Element]:
    """Recompute the continuation suffix of every character cue.

    Each cue is judged against the elements before it, so the result is
    the same whether the sequence is resolved in one pass or after every
    individual edit. Elements whose text does not change are returned as
    the same objects.

    Args:
        elements: The element sequence.

    Returns:
        A new list holding the resolved elements.
    """
    resolved: list[Element] = []
    for index, element in enumerate(elements):
        if element.type is ElementType.CHARACTER:
            text = apply_continuation(element.text, index, elements)
            if text != element.text:
                logger.debug(
                    "Continuation updated",
                    element_id=element.id,
                    index=index,
                    text=text,
                )
                element = element.model_copy(update={"text": text})
        resolved.append(element)
    return resolved
