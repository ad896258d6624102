"""Screenwrite Data Models.

This module defines the screenplay document model: the ordered sequence of
elements the editing surface owns, plus the story-structure entities
(structures, acts and beats) that scene headings may be tagged against.
Structures are owned outside the core; they are modelled here only at the
interface the core reads.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ElementType(str, Enum):
    """Screenplay element types."""

    SCENE_HEADING = "scene-heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    NOTE = "note"

    @classmethod
    def coerce(cls, value: Any) -> ElementType:
        """Turn loosely typed input into an element type.

        Accepts members, any-case strings and underscore spellings such as
        ``scene_heading``. Anything unrecognised falls back to ``ACTION``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-").replace(" ", "-")
            try:
                return cls(key)
            except ValueError:
                return cls.ACTION
        return cls.ACTION


def new_element_id() -> str:
    """Generate an opaque element identifier."""
    return str(uuid4())


class Element(BaseModel):
    """One classified block of screenplay text."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_element_id)
    type: ElementType = ElementType.ACTION
    text: str = ""
    tags: list[str] = Field(default_factory=list)
    beat: str | None = None
    act_id: str | None = Field(default=None, alias="actId")
    page_break: bool = Field(default=False, alias="pageBreak")
    page: int | None = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v: Any) -> ElementType:
        """Unknown element types fall back to action."""
        return ElementType.coerce(v)

    @field_validator("text", mode="before")
    @classmethod
    def text_not_none(cls, v: Any) -> str:
        """Treat missing text as an empty string."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("tags", mode="before")
    @classmethod
    def dedupe_tags(cls, v: Any) -> list[str]:
        """Tags behave as a set but keep first-seen order for display."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        elif not isinstance(v, list | tuple | set | frozenset):
            raise ValueError(f"tags must be a list of strings, got {type(v).__name__}")
        seen: dict[str, None] = {}
        for tag in v:
            if tag is None:
                continue
            seen.setdefault(str(tag), None)
        return list(seen)


class ScriptContent(BaseModel):
    """The ordered element sequence of one screenplay."""

    elements: list[Element] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def elements_not_none(cls, v: Any) -> Any:
        """Treat a missing element list as an empty document."""
        return [] if v is None else v

    def index_of(self, element_id: str) -> int:
        """Return the position of an element, or -1 when it is absent."""
        for i, element in enumerate(self.elements):
            if element.id == element_id:
                return i
        return -1

    def get(self, element_id: str) -> Element | None:
        """Look up an element by id."""
        index = self.index_of(element_id)
        return self.elements[index] if index >= 0 else None


class Beat(BaseModel):
    """A story beat inside an act."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str = ""
    time_position: float = Field(default=0.0, alias="timePosition")
    page_range: str | None = Field(default=None, alias="pageRange")
    complete: bool = False
    notes: str | None = None


class Act(BaseModel):
    """An act of a story structure, owning an ordered list of beats."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    color_hex: str = Field(default="#888888", alias="colorHex")
    start_position: float = Field(default=0.0, alias="startPosition")
    end_position: float = Field(default=100.0, alias="endPosition")
    beats: list[Beat] = Field(default_factory=list)


class Structure(BaseModel):
    """A story structure (e.g. three-act, Save the Cat)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str | None = None
    acts: list[Act] = Field(default_factory=list)
    structure_type: str | None = None

    def find_beat(self, beat_id: str) -> tuple[Act, Beat] | None:
        """Locate a beat and its owning act."""
        for act in self.acts:
            for beat in act.beats:
                if beat.id == beat_id:
                    return act, beat
        return None


class Project(BaseModel):
    """A screenplay project as handed over by the storage layer."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_element_id)
    title: str = "Untitled"
    content: ScriptContent = Field(default_factory=ScriptContent)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    author_id: str | None = None


class BeatSceneCount(BaseModel):
    """How many scene headings are tagged with a beat, and where they fall."""

    beat_id: str
    act_id: str
    count: int
    page_range: str = ""
    scene_ids: list[str] = Field(default_factory=list)


__all__ = [
    "Act",
    "Beat",
    "BeatSceneCount",
    "Element",
    "ElementType",
    "Project",
    "ScriptContent",
    "Structure",
    "new_element_id",
]
