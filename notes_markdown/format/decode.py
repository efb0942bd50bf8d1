from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ..errors import DecodeError, DepthExceededError
from ..models import Node


def _too_deep(errors: List[Dict[str, Any]]) -> bool:
    # The JSON parser has its own nesting limit, below the renderer's
    for err in errors:
        if err["type"] == "recursion_loop":
            return True
        if err["type"] == "json_invalid" and "recursion limit" in err["msg"]:
            return True
    return False


def decode(raw: Union[bytes, str]) -> Node:
    """Parse a JSON payload into a document `Node`.

    Unknown fields are ignored and missing ones take their defaults. Invalid
    JSON, or a top-level value that is not a node object, raises `DecodeError`
    with the validation errors under ``context["errors"]``. Well-formed JSON
    nested past the parser's limit raises `DepthExceededError` instead.
    """
    try:
        return Node.model_validate_json(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_input=False)
        reason = errors[0]["msg"] if errors else str(e)
        if _too_deep(errors):
            raise DepthExceededError(
                f"document nested too deeply to parse: {reason}",
                context={"errors": errors},
            ) from e
        raise DecodeError(
            f"failed to parse ProseMirror JSON: {reason}",
            context={"errors": errors},
        ) from e
