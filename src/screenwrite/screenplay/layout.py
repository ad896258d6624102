"""Line estimation on a fixed-width monospace screenplay page.

Every call site that needs a line count reads the same ``ELEMENT_METRICS``
table, so pagination and any other consumer cannot drift apart.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from screenwrite.models import ElementType


@dataclass(frozen=True)
class ElementMetrics:
    """Layout constants of one element type.

    Attributes:
        char_width: Characters that fit on one printed line, narrower for
            indented elements (12pt Courier, 10 characters per inch).
        spacing_after: Blank lines that follow the element.
    """

    char_width: int
    spacing_after: int


ELEMENT_METRICS: dict[ElementType, ElementMetrics] = {
    ElementType.SCENE_HEADING: ElementMetrics(char_width=60, spacing_after=1),
    ElementType.ACTION: ElementMetrics(char_width=60, spacing_after=1),
    ElementType.CHARACTER: ElementMetrics(char_width=38, spacing_after=0),
    ElementType.DIALOGUE: ElementMetrics(char_width=35, spacing_after=1),
    ElementType.PARENTHETICAL: ElementMetrics(char_width=25, spacing_after=0),
    ElementType.TRANSITION: ElementMetrics(char_width=60, spacing_after=1),
    ElementType.NOTE: ElementMetrics(char_width=60, spacing_after=0),
}


def metrics_for(element_type: Any) -> ElementMetrics:
    """Look up the metrics of a type; unknown types use action metrics."""
    return ELEMENT_METRICS[ElementType.coerce(element_type)]


def estimate_lines(text: str | None, element_type: Any) -> int:
    """Estimate how many printed lines an element occupies.

    The text is split on explicit line breaks; each segment wraps at the
    type's character width and takes at least one line. The type's
    trailing spacing is added on top.

    Args:
        text: Element text. ``None`` counts as empty.
        element_type: Element type (member or string).

    Returns:
        Estimated line count, always at least 1.
    """
    metrics = metrics_for(element_type)
    segments = (text or "").replace("\r\n", "\n").split("\n")
    body = sum(
        max(1, math.ceil(len(segment) / metrics.char_width)) for segment in segments
    )
    return body + metrics.spacing_after
