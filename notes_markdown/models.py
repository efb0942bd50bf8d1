from __future__ import annotations

import math
import sys
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

AttrValue = Union[bool, int, float, str, None]
Attrs = Dict[str, AttrValue]

_SCALARS = (bool, int, float, str, type(None))


def _scalar_attrs(value: Any) -> Any:
    # Editors attach nested objects to some attrs; keep only scalar values
    if value is None:
        return {}
    if isinstance(value, dict):
        return {k: v for k, v in value.items() if isinstance(v, _SCALARS)}
    return value


class Mark(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = ""
    attrs: Attrs = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _none_type(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("attrs", mode="before")
    @classmethod
    def _attrs(cls, v: Any) -> Any:
        return _scalar_attrs(v)


class Node(BaseModel):
    """A node of a ProseMirror document tree.

    Only `type` decides how the rest is read: containers use `content`, text
    runs use `text` and `marks`. Missing fields take empty defaults.
    """

    model_config = ConfigDict(frozen=True)

    type: str = ""
    content: Tuple["Node", ...] = ()
    text: str = ""
    marks: Tuple[Mark, ...] = ()
    attrs: Attrs = Field(default_factory=dict)

    @field_validator("type", "text", mode="before")
    @classmethod
    def _none_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("content", "marks", mode="before")
    @classmethod
    def _none_seq(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("attrs", mode="before")
    @classmethod
    def _attrs(cls, v: Any) -> Any:
        return _scalar_attrs(v)


Node.model_rebuild()


def attr_int(attrs: Attrs, key: str, default: int, maximum: int = sys.maxsize) -> int:
    value = attrs.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    if abs(value) > maximum:
        return default
    return int(value)


def attr_str(attrs: Attrs, key: str, default: str = "") -> str:
    value = attrs.get(key)
    return value if isinstance(value, str) else default


class PanelContent(BaseModel):
    # Either a document tree or a plain string
    content: Any = None


class NoteDocument(BaseModel):
    id: str
    title: str = ""
    created_at: str = ""
    updated_at: str = ""
    notes_markdown: str = ""
    last_viewed_panel: Optional[PanelContent] = None

    @field_validator("title", "created_at", "updated_at", "notes_markdown", mode="before")
    @classmethod
    def _none_str(cls, v: Any) -> Any:
        return "" if v is None else v
