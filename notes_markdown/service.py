from __future__ import annotations

import json
import logging
from typing import Optional, Union

from .errors import DecodeError, MissingContentError
from .format.prosemirror import prosemirror_to_markdown
from .models import NoteDocument
from .utils.dates import format_display, format_iso_utc

logger = logging.getLogger(__name__)


def panel_to_markdown(raw: Union[bytes, str], max_depth: Optional[int] = None) -> str:
    """Convert panel content to Markdown, accepting plain-string panels.

    Some panels carry a JSON string instead of a document tree. When the tree
    cannot be decoded the same payload is read as a string literal and
    returned verbatim; otherwise the original `DecodeError` propagates.
    """
    try:
        return prosemirror_to_markdown(raw, max_depth=max_depth)
    except DecodeError as e:
        try:
            plain = json.loads(raw)
        except ValueError:
            raise e
        if not isinstance(plain, str):
            raise e
        logger.info("panel content is a plain string, using it verbatim")
        return plain


def summary_markdown(note: NoteDocument, max_depth: Optional[int] = None) -> str:
    panel = note.last_viewed_panel
    if panel is None or panel.content is None:
        raise MissingContentError(
            "No AI summary available for this note. Try --notes to see your typed notes.",
            context={"id": note.id},
        )
    return panel_to_markdown(json.dumps(panel.content), max_depth=max_depth)


def notes_markdown(note: NoteDocument) -> str:
    if not note.notes_markdown:
        raise MissingContentError("No typed notes available for this note.", context={"id": note.id})
    return note.notes_markdown


def note_body(note: NoteDocument, notes: bool = False, max_depth: Optional[int] = None) -> str:
    return notes_markdown(note) if notes else summary_markdown(note, max_depth=max_depth)


def render_note(note: NoteDocument, body: str) -> str:
    """Title and creation date header followed by the note body."""
    return f"# {note.title}\nCreated: {format_display(note.created_at)}\n\n{body}"


def note_to_json(note: NoteDocument, body: str) -> str:
    out = {
        "id": note.id,
        "title": note.title,
        "created_at": format_iso_utc(note.created_at),
        "updated_at": format_iso_utc(note.updated_at),
        "content": body,
    }
    return json.dumps(out, indent=2, ensure_ascii=False)
