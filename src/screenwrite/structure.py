"""Lookups derived from the element sequence.

These feed the editing surface: autocomplete suggestions, the tag and act
filters, and the per-beat scene counts shown in the structure bar.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from screenwrite.config import DEFAULT_LINES_PER_PAGE
from screenwrite.models import BeatSceneCount, Element, ElementType, Structure
from screenwrite.screenplay.normalizer import split_character_name
from screenwrite.screenplay.paginator import assign_page_numbers
from screenwrite.utils.screenplay import ScreenplayUtils


def _unique(values: Sequence[str | None]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def character_names(elements: Sequence[Element]) -> list[str]:
    """Speaker names in order of first appearance, without ``(CONT'D)``."""
    return _unique(
        [
            split_character_name(e.text)[0]
            for e in elements
            if e.type is ElementType.CHARACTER
        ]
    )


def location_names(elements: Sequence[Element]) -> list[str]:
    """Scene locations in order of first appearance."""
    return _unique(
        [
            ScreenplayUtils.extract_location(e.text)
            for e in elements
            if e.type is ElementType.SCENE_HEADING
        ]
    )


def all_tags(elements: Sequence[Element]) -> list[str]:
    """Every tag used in the document, in order of first appearance."""
    return _unique([tag for e in elements for tag in e.tags])


def filter_by_tag(elements: Sequence[Element], tag: str | None) -> list[Element]:
    """Elements carrying ``tag``; no tag means no filtering."""
    if not tag:
        return list(elements)
    return [e for e in elements if tag in e.tags]


def filter_by_act(elements: Sequence[Element], act_id: str | None) -> list[Element]:
    """Elements tagged against ``act_id``; no act means no filtering."""
    if not act_id:
        return list(elements)
    return [e for e in elements if e.act_id == act_id]


def format_page_range(pages: Sequence[int]) -> str:
    """Render page numbers as ``p.N`` or ``pp.N-M``; empty input gives ``""``."""
    if not pages:
        return ""
    low, high = min(pages), max(pages)
    return f"p.{low}" if low == high else f"pp.{low}-{high}"


def beat_scene_counts(
    elements: Sequence[Element],
    structure: Structure | None,
    page_numbers: Mapping[str, int] | None = None,
    lines_per_page: int = DEFAULT_LINES_PER_PAGE,
) -> list[BeatSceneCount]:
    """Count the scene headings tagged with each beat of a structure.

    Scene headings referencing beats that are not part of ``structure`` are
    ignored.

    Args:
        elements: The element sequence.
        structure: Structure whose beats are counted; None yields no counts.
        page_numbers: Element id to page number. Computed with the
            paginator when omitted.
        lines_per_page: Page capacity used when paginating.

    Returns:
        One entry per beat, in structure order.
    """
    if structure is None:
        return []
    if page_numbers is None:
        page_numbers = assign_page_numbers(elements, lines_per_page)

    counts: list[BeatSceneCount] = []
    for act in structure.acts:
        for beat in act.beats:
            scenes = [
                e
                for e in elements
                if e.type is ElementType.SCENE_HEADING and e.beat == beat.id
            ]
            pages = [page_numbers[e.id] for e in scenes if e.id in page_numbers]
            counts.append(
                BeatSceneCount(
                    beat_id=beat.id,
                    act_id=act.id,
                    count=len(scenes),
                    page_range=format_page_range(pages),
                    scene_ids=[e.id for e in scenes],
                )
            )
    return counts
