"""Editing commands over a screenplay document.

Every command takes a ``ScriptContent`` value and returns an
``EditResult`` holding a new value; the input is never mutated. After a
change the touched element is re-normalized and continuation suffixes are
recomputed across the whole sequence. Invalid requests (unknown or
duplicated ids, out-of-range positions) are logged and answered with
``success=False`` and the original content.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from screenwrite.config import get_logger
from screenwrite.models import Element, ElementType, ScriptContent
from screenwrite.screenplay.classifier import classify
from screenwrite.screenplay.continuation import (
    SCENE_BOUNDARIES,
    resolve_continuations,
)
from screenwrite.screenplay.keymap import next_type_on_enter
from screenwrite.screenplay.normalizer import (
    base_character_name,
    normalize,
    split_character_name,
)

logger = get_logger(__name__)


@dataclass
class EditResult:
    """Result of an editing command."""

    success: bool
    content: ScriptContent
    element: Element | None = None
    error: str | None = None


def find_duplicate_ids(content: ScriptContent) -> list[str]:
    """Return ids that occur more than once, in first-seen order."""
    counts = Counter(element.id for element in content.elements)
    return [element_id for element_id, count in counts.items() if count > 1]


def _reject(content: ScriptContent, error: str, **context: Any) -> EditResult:
    logger.warning(f"Edit rejected: {error}", **context)
    return EditResult(success=False, content=content, error=error)


def _locate(content: ScriptContent, element_id: str) -> int | str:
    """Return the element's index, or an error message."""
    matches = [i for i, e in enumerate(content.elements) if e.id == element_id]
    if not matches:
        return f"Element not found: {element_id}"
    if len(matches) > 1:
        return f"Duplicate element id: {element_id}"
    return matches[0]


def _commit(
    content: ScriptContent, elements: list[Element], element_id: str | None
) -> EditResult:
    """Resolve continuations and wrap the new sequence in a result."""
    updated = ScriptContent(elements=resolve_continuations(elements))
    element = updated.get(element_id) if element_id else None
    return EditResult(success=True, content=updated, element=element)


def _last_speaker(elements: list[Element], before: int) -> str:
    """Base name of the nearest cue before ``before`` in the same scene."""
    for element in reversed(elements[:before]):
        if element.type in SCENE_BOUNDARIES:
            break
        if element.type is ElementType.CHARACTER:
            return base_character_name(element.text)
    return ""


def _reformat(element: Element, **update: Any) -> Element:
    """Copy an element with updates and normalize its text for its type."""
    changed = element.model_copy(update=update)
    return changed.model_copy(update={"text": normalize(changed.type, changed.text)})


def insert_element_after(
    content: ScriptContent,
    element_id: str | None,
    element_type: Any = None,
    text: str = "",
) -> EditResult:
    """Insert a new element after ``element_id``.

    Args:
        content: Current document.
        element_id: Element to insert after; None inserts at the start.
        element_type: Explicit type. When omitted, the type follows the
            Enter table from the preceding element (action at the start).
        text: Initial text of the new element. An empty character cue
            starts with the name of the last speaker in the scene.

    Returns:
        Result holding the new document and the created element.
    """
    if element_id is None:
        index = 0
        previous = None
    else:
        located = _locate(content, element_id)
        if isinstance(located, str):
            return _reject(content, located, element_id=element_id)
        index = located + 1
        previous = content.elements[located]

    if element_type is not None:
        kind = ElementType.coerce(element_type)
    elif previous is not None:
        kind = next_type_on_enter(previous.type)
    else:
        kind = ElementType.ACTION

    if kind is ElementType.CHARACTER and not (text or "").strip():
        # A new cue starts with the last speaker; continuation adds the suffix
        text = _last_speaker(content.elements, index)

    taken = {e.id for e in content.elements}
    new_element = Element(type=kind, text=normalize(kind, text))
    while new_element.id in taken:
        new_element = Element(type=kind, text=new_element.text)

    elements = list(content.elements)
    elements.insert(index, new_element)
    logger.debug(
        "Inserted element",
        element_id=new_element.id,
        type=kind.value,
        index=index,
    )
    return _commit(content, elements, new_element.id)


def change_element_type(
    content: ScriptContent, element_id: str, new_type: Any
) -> EditResult:
    """Change an element's type and re-normalize its text.

    A cue turned into another type drops its derived (CONT'D) suffix.
    """
    located = _locate(content, element_id)
    if isinstance(located, str):
        return _reject(content, located, element_id=element_id)

    kind = ElementType.coerce(new_type)
    elements = list(content.elements)
    element = elements[located]
    update: dict[str, Any] = {"type": kind}
    if element.type is ElementType.CHARACTER and kind is not ElementType.CHARACTER:
        update["text"] = split_character_name(element.text)[0]
    elements[located] = _reformat(element, **update)
    logger.debug("Changed element type", element_id=element_id, type=kind.value)
    return _commit(content, elements, element_id)


def update_element_text(
    content: ScriptContent,
    element_id: str,
    text: str | None,
    reclassify: bool = True,
) -> EditResult:
    """Replace an element's text.

    Args:
        content: Current document.
        element_id: Element to edit.
        text: New raw text.
        reclassify: Re-infer the type from the text and the preceding
            element. Notes are never reclassified.

    Returns:
        Result holding the new document and the edited element.
    """
    located = _locate(content, element_id)
    if isinstance(located, str):
        return _reject(content, located, element_id=element_id)

    elements = list(content.elements)
    element = elements[located]
    kind = element.type
    if reclassify and kind is not ElementType.NOTE:
        previous = elements[located - 1].type if located > 0 else None
        kind = classify(text, previous)

    elements[located] = _reformat(element, type=kind, text=text or "")
    return _commit(content, elements, element_id)


def delete_element(content: ScriptContent, element_id: str) -> EditResult:
    """Remove an element; cues after it get their continuation recomputed."""
    located = _locate(content, element_id)
    if isinstance(located, str):
        return _reject(content, located, element_id=element_id)

    elements = list(content.elements)
    removed = elements.pop(located)
    logger.debug("Deleted element", element_id=element_id, index=located)
    result = _commit(content, elements, None)
    result.element = removed
    return result


def move_element(
    content: ScriptContent, element_id: str, new_index: int
) -> EditResult:
    """Move an element to ``new_index`` (position in the resulting sequence)."""
    located = _locate(content, element_id)
    if isinstance(located, str):
        return _reject(content, located, element_id=element_id)
    if not 0 <= new_index < len(content.elements):
        return _reject(
            content,
            f"Index out of range: {new_index}",
            element_id=element_id,
            length=len(content.elements),
        )

    elements = list(content.elements)
    elements.insert(new_index, elements.pop(located))
    return _commit(content, elements, element_id)


def insert_soft_return(content: ScriptContent, element_id: str) -> EditResult:
    """Append an explicit line break inside a dialogue element."""
    located = _locate(content, element_id)
    if isinstance(located, str):
        return _reject(content, located, element_id=element_id)

    element = content.elements[located]
    if element.type is not ElementType.DIALOGUE:
        return _reject(
            content,
            "Soft returns are only allowed in dialogue",
            element_id=element_id,
            type=element.type.value,
        )

    elements = list(content.elements)
    elements[located] = element.model_copy(update={"text": element.text + "\n"})
    return EditResult(
        success=True,
        content=ScriptContent(elements=elements),
        element=elements[located],
    )


def _update_fields(
    content: ScriptContent, element_id: str, **update: Any
) -> EditResult:
    located = _locate(content, element_id)
    if isinstance(located, str):
        return _reject(content, located, element_id=element_id)

    elements = list(content.elements)
    # Run the update through validation so tags get de-duplicated
    data = elements[located].model_dump()
    data.update(update)
    elements[located] = Element.model_validate(data)
    return EditResult(
        success=True,
        content=ScriptContent(elements=elements),
        element=elements[located],
    )


def set_element_tags(
    content: ScriptContent, element_id: str, tags: Iterable[str]
) -> EditResult:
    """Replace an element's tags."""
    return _update_fields(content, element_id, tags=list(tags))


def tag_beat(
    content: ScriptContent,
    element_id: str,
    beat_id: str | None,
    act_id: str | None = None,
) -> EditResult:
    """Attach an element to a beat; ``beat_id=None`` removes the tag."""
    if beat_id is None:
        act_id = None
    return _update_fields(content, element_id, beat=beat_id, act_id=act_id)


def set_page_break(
    content: ScriptContent, element_id: str, page_break: bool = True
) -> EditResult:
    """Force (or stop forcing) a page boundary before an element."""
    return _update_fields(content, element_id, page_break=page_break)


def reflow(content: ScriptContent) -> ScriptContent:
    """Re-normalize every element and recompute continuation suffixes.

    Used when loading documents written by other tools, whose text may not
    follow the casing and wrapping rules the editor enforces.
    """
    elements = [
        element.model_copy(update={"text": normalize(element.type, element.text)})
        for element in content.elements
    ]
    return ScriptContent(elements=resolve_continuations(elements))
