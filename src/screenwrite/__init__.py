"""Screenwrite: screenplay formatting and page estimation.

Screenwrite holds the editing core of a screenplay editor: element type
inference for free-typed text, per-type formatting, automatic ``(CONT'D)``
suffixes on character cues, and line-based page estimation that keeps
dialogue together with its speaker.
"""

from .config import ScreenwriteSettings, get_logger, get_settings
from .document import EditResult, change_element_type, insert_element_after
from .models import Element, ElementType, Project, ScriptContent, Structure
from .screenplay import (
    apply_continuation,
    classify,
    estimate_lines,
    normalize,
    paginate,
    should_continue,
)

__version__ = "0.1.0"

__all__ = [
    "EditResult",
    "Element",
    "ElementType",
    "Project",
    "ScreenwriteSettings",
    "ScriptContent",
    "Structure",
    "__version__",
    "apply_continuation",
    "change_element_type",
    "classify",
    "estimate_lines",
    "get_logger",
    "get_settings",
    "insert_element_after",
    "normalize",
    "paginate",
    "should_continue",
]
