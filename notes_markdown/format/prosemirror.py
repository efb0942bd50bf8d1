"""ProseMirror document tree -> Markdown.

Block nodes append to a list buffer; inline runs are rendered to a string per
block. Indentation depth only grows inside lists, while tree nesting is tracked
separately so that hostile inputs stop with `DepthExceededError`.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Union

from .. import config
from ..errors import DepthExceededError
from ..models import Node, attr_int, attr_str
from .decode import decode
from .marks import apply_marks

logger = logging.getLogger(__name__)

LIST_TYPES = ("bulletList", "orderedList")


class MarkdownRenderer:
    def __init__(self, max_depth: Optional[int] = None) -> None:
        self.max_depth = config.DEFAULT_MAX_DEPTH if max_depth is None else max_depth
        self._nesting = 0

    def render(self, node: Node) -> str:
        """Render a whole tree, ending with exactly one newline."""
        out: List[str] = []
        self.render_block(node, 0, out)
        return "".join(out).rstrip() + "\n"

    @contextmanager
    def _nested(self, node: Node) -> Iterator[None]:
        self._nesting += 1
        try:
            if self._nesting > self.max_depth:
                raise DepthExceededError(
                    f"document nested deeper than {self.max_depth} nodes",
                    context={"max_depth": self.max_depth, "node_type": node.type},
                )
            yield
        finally:
            self._nesting -= 1

    def render_block(self, node: Node, depth: int, out: List[str]) -> None:
        with self._nested(node):
            self._dispatch(node, depth, out)

    def _dispatch(self, node: Node, depth: int, out: List[str]) -> None:
        kind = node.type
        if kind == "doc":
            for child in node.content:
                self.render_block(child, depth, out)
        elif kind == "paragraph":
            out.append(self.render_inline(node.content) + "\n\n")
        elif kind == "heading":
            level = attr_int(node.attrs, "level", 1, maximum=config.MAX_HEADING_LEVEL)
            out.append("#" * level + " " + self.render_inline(node.content) + "\n\n")
        elif kind in LIST_TYPES:
            self._render_list(node, depth, out)
        elif kind == "listItem":
            self._render_list_item(node, depth, "- ", out)
        elif kind == "blockquote":
            inner: List[str] = []
            for child in node.content:
                self.render_block(child, depth, inner)
            for line in "".join(inner).rstrip("\n").split("\n"):
                out.append(f"> {line}\n")
            out.append("\n")
        elif kind == "codeBlock":
            lang = attr_str(node.attrs, "language")
            code = self.render_inline(node.content, marks=False)
            out.append(f"```{lang}\n{code}\n```\n\n")
        elif kind == "hardBreak":
            out.append("\n")
        elif kind == "horizontalRule":
            out.append("---\n\n")
        elif kind == "text":
            out.append(apply_marks(node.text, node.marks))
        elif node.content:
            logger.debug("passing through unknown node type %r", kind)
            for child in node.content:
                self.render_block(child, depth, out)
        else:
            logger.debug("skipping unknown leaf node type %r", kind)

    def _render_list(self, node: Node, depth: int, out: List[str]) -> None:
        ordered = node.type == "orderedList"
        for i, item in enumerate(node.content):
            # Numbering always comes from position, never from attrs
            prefix = f"{i + 1}. " if ordered else "- "
            with self._nested(item):
                self._render_list_item(item, depth, prefix, out)
        if depth == 0:
            out.append("\n")

    def _render_list_item(self, item: Node, depth: int, prefix: str, out: List[str]) -> None:
        indent = "  " * depth
        for j, child in enumerate(item.content):
            if child.type == "paragraph":
                lead = prefix if j == 0 else " " * len(prefix)
                with self._nested(child):
                    out.append(indent + lead + self.render_inline(child.content) + "\n")
            elif child.type in LIST_TYPES:
                with self._nested(child):
                    self._render_list(child, depth + 1, out)
            else:
                if j == 0:
                    out.append(indent + prefix)
                self.render_block(child, depth, out)

    def render_inline(self, nodes: Sequence[Node], marks: bool = True) -> str:
        """Render a run of inline nodes to one string.

        Block nodes showing up here are rendered through `render_block` at
        depth 0 rather than failing.
        """
        parts: List[str] = []
        for node in nodes:
            if node.type == "text":
                parts.append(apply_marks(node.text, node.marks) if marks else node.text)
            elif node.type == "hardBreak":
                parts.append("\n")
            else:
                self.render_block(node, 0, parts)
        return "".join(parts)


def render(node: Node, max_depth: Optional[int] = None) -> str:
    return MarkdownRenderer(max_depth).render(node)


def prosemirror_to_markdown(raw: Union[bytes, str], max_depth: Optional[int] = None) -> str:
    """Convert a ProseMirror JSON payload to Markdown.

    Raises `DecodeError` for payloads that are not a document tree and
    `DepthExceededError` for trees nested deeper than `max_depth`.
    """
    return render(decode(raw), max_depth=max_depth)
