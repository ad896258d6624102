"""Page-break placement for a screenplay element sequence."""

from __future__ import annotations

from collections.abc import Sequence

from screenwrite.config import DEFAULT_LINES_PER_PAGE, get_logger
from screenwrite.models import Element, ElementType, ScriptContent
from screenwrite.screenplay.layout import estimate_lines

logger = get_logger(__name__)

# Elements that must not start a page without their character cue
SPEECH_TYPES = frozenset({ElementType.DIALOGUE, ElementType.PARENTHETICAL})


def _cue_block_start(page: list[Element], current: Element) -> int | None:
    """Find where a trailing character cue block starts on a page.

    A dialogue line drags its cue along with any parentheticals directly
    under the cue; a parenthetical only drags a cue that immediately
    precedes it.

    Returns:
        Index into ``page`` of the character cue, or None when the page
        does not end with a cue belonging to ``current``.
    """
    if current.type not in SPEECH_TYPES or not page:
        return None

    i = len(page) - 1
    if current.type is ElementType.DIALOGUE:
        while i >= 0 and page[i].type is ElementType.PARENTHETICAL:
            i -= 1
    if i >= 0 and page[i].type is ElementType.CHARACTER:
        return i
    return None


def paginate(
    elements: Sequence[Element], lines_per_page: int = DEFAULT_LINES_PER_PAGE
) -> list[list[Element]]:
    """Partition an element sequence into pages.

    Elements accumulate onto a page until the next one would overflow it.
    An element flagged with ``page_break`` always starts a new page. A
    character cue is never left alone at the bottom of a page while its
    dialogue or parenthetical starts the next one: the cue moves down
    with it.

    Args:
        elements: Elements in reading order.
        lines_per_page: Page capacity in estimated lines; values below 1
            are treated as 1.

    Returns:
        Pages in order. Every element appears on exactly one page and no
        page is empty, except that an empty sequence yields ``[[]]``.
    """
    if lines_per_page < 1:
        logger.warning(
            "Invalid page capacity, using one line per page",
            lines_per_page=lines_per_page,
        )
        lines_per_page = 1

    pages: list[list[Element]] = []
    page: list[Element] = []
    line_count = 0

    for element in elements:
        lines = estimate_lines(element.text, element.type)

        if element.page_break and page:
            pages.append(page)
            page, line_count = [], 0

        if page and line_count + lines > lines_per_page:
            start = _cue_block_start(page, element)
            if start == 0:
                # The cue block fills the page on its own; keep the pair on it
                page.append(element)
                line_count += lines
                continue

            pages.append(page)
            if start is None:
                page, line_count = [element], lines
            else:
                carried = page[start:]
                del pages[-1][start:]
                page = [*carried, element]
                line_count = lines + sum(
                    estimate_lines(e.text, e.type) for e in carried
                )
            continue

        page.append(element)
        line_count += lines

    if page or not pages:
        pages.append(page)

    logger.debug(
        "Paginated screenplay",
        elements=len(elements),
        pages=len(pages),
        lines_per_page=lines_per_page,
    )
    return pages


def assign_page_numbers(
    elements: Sequence[Element], lines_per_page: int = DEFAULT_LINES_PER_PAGE
) -> dict[str, int]:
    """Map each element id to its 1-based page number."""
    return {
        element.id: number
        for number, page in enumerate(paginate(elements, lines_per_page), start=1)
        for element in page
    }


def page_count(
    elements: Sequence[Element], lines_per_page: int = DEFAULT_LINES_PER_PAGE
) -> int:
    """Estimate the number of pages; an empty screenplay still has one."""
    return len(paginate(elements, lines_per_page))


def paginate_content(
    content: ScriptContent, lines_per_page: int = DEFAULT_LINES_PER_PAGE
) -> ScriptContent:
    """Return a copy of the content with ``page`` set on every element."""
    numbers = assign_page_numbers(content.elements, lines_per_page)
    return ScriptContent(
        elements=[
            element.model_copy(update={"page": numbers[element.id]})
            for element in content.elements
        ]
    )
