import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


# Deepest node nesting the renderer accepts before giving up
DEFAULT_MAX_DEPTH = _env_int("NOTES_MD_MAX_DEPTH", 200)

DEFAULT_LOG_LEVEL = os.environ.get("NOTES_MD_LOG_LEVEL", "WARNING")

# Heading levels above this are treated like a missing level
MAX_HEADING_LEVEL = _env_int("NOTES_MD_MAX_HEADING_LEVEL", 64)
