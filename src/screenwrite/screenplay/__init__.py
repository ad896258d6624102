"""Screenplay classification, formatting and layout."""

from screenwrite.screenplay.classifier import classify
from screenwrite.screenplay.continuation import (
    apply_continuation,
    resolve_continuations,
    should_continue,
)
from screenwrite.screenplay.keymap import (
    ENTER_NEXT_TYPE,
    TAB_CYCLE,
    cycle_type,
    next_type_on_enter,
)
from screenwrite.screenplay.layout import (
    ELEMENT_METRICS,
    ElementMetrics,
    estimate_lines,
)
from screenwrite.screenplay.normalizer import (
    CONTINUATION_SUFFIX,
    normalize,
    split_character_name,
)
from screenwrite.screenplay.paginator import (
    assign_page_numbers,
    page_count,
    paginate,
    paginate_content,
)

__all__ = [
    "CONTINUATION_SUFFIX",
    "ELEMENT_METRICS",
    "ENTER_NEXT_TYPE",
    "TAB_CYCLE",
    "ElementMetrics",
    "apply_continuation",
    "assign_page_numbers",
    "classify",
    "cycle_type",
    "estimate_lines",
    "next_type_on_enter",
    "normalize",
    "page_count",
    "paginate",
    "paginate_content",
    "resolve_continuations",
    "should_continue",
    "split_character_name",
]
