"""Keyboard tables shared with the editing surface.

Enter creates a new element whose type follows from the current one; Tab
cycles the current element through the screenplay types. The tables agree
with the classifier: a line created after a character cue is dialogue, and
the classifier keeps unmatched text after a cue as dialogue too.
"""

from __future__ import annotations

from typing import Any

from screenwrite.models import ElementType

ENTER_NEXT_TYPE: dict[ElementType, ElementType] = {
    ElementType.SCENE_HEADING: ElementType.ACTION,
    ElementType.CHARACTER: ElementType.DIALOGUE,
    ElementType.DIALOGUE: ElementType.ACTION,
    ElementType.PARENTHETICAL: ElementType.DIALOGUE,
    ElementType.TRANSITION: ElementType.SCENE_HEADING,
}

TAB_CYCLE: tuple[ElementType, ...] = (
    ElementType.SCENE_HEADING,
    ElementType.ACTION,
    ElementType.CHARACTER,
    ElementType.DIALOGUE,
    ElementType.PARENTHETICAL,
    ElementType.TRANSITION,
)


def next_type_on_enter(current_type: Any) -> ElementType:
    """Type of the element Enter creates after an element of ``current_type``."""
    return ENTER_NEXT_TYPE.get(ElementType.coerce(current_type), ElementType.ACTION)


def cycle_type(current_type: Any) -> ElementType:
    """Type Tab switches to; types outside the cycle restart it."""
    kind = ElementType.coerce(current_type)
    if kind not in TAB_CYCLE:
        return TAB_CYCLE[0]
    return TAB_CYCLE[(TAB_CYCLE.index(kind) + 1) % len(TAB_CYCLE)]
