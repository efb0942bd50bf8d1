import logging
from typing import Iterable

from ..models import Mark, attr_str

logger = logging.getLogger(__name__)


def _wrap(text: str, mark: Mark) -> str:
    kind = mark.type
    if kind in ("bold", "strong"):
        return f"**{text}**"
    if kind in ("italic", "em"):
        return f"_{text}_"
    if kind == "code":
        # Other marks nested in a code span are left as-is
        return f"`{text}`"
    if kind == "link":
        return f"[{text}]({attr_str(mark.attrs, 'href')})"
    if kind == "strikethrough":
        return f"~~{text}~~"
    logger.debug("ignoring unknown mark type %r", kind)
    return text


def apply_marks(text: str, marks: Iterable[Mark]) -> str:
    """Wrap `text` in Markdown delimiters for each mark.

    The first mark ends up outermost: ``[bold, italic]`` gives ``**_x_**``.
    Unknown mark types leave the text untouched.
    """
    for mark in reversed(tuple(marks)):
        text = _wrap(text, mark)
    return text
