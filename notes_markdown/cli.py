import sys
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from .errors import MissingContentError, NotesMarkdownError
from .format.prosemirror import prosemirror_to_markdown
from .logging_config import configure_logging, err_console
from .models import NoteDocument
from .service import note_body, note_to_json, panel_to_markdown, render_note

app = typer.Typer(help="Notes Markdown: render rich-text note panels as Markdown")


def read_payload(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        raise typer.BadParameter(f"cannot read {path}: {e.strerror}")


def fail(message: str) -> NoReturn:
    err_console.print(f"Error: {message}", style="bold red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def convert(
    path: str = typer.Argument("-", help="Panel JSON file ('-' reads stdin)"),
    strict: bool = typer.Option(False, help="Fail instead of treating undecodable payloads as plain strings"),
    max_depth: Optional[int] = typer.Option(None, min=1, help="Deepest node nesting to accept"),
    log_level: Optional[str] = typer.Option(None, help="Log level for diagnostics on stderr"),
):
    """Convert a ProseMirror panel payload to Markdown."""
    configure_logging(log_level)
    raw = read_payload(path)
    try:
        if strict:
            md = prosemirror_to_markdown(raw, max_depth=max_depth)
        else:
            md = panel_to_markdown(raw, max_depth=max_depth)
    except NotesMarkdownError as e:
        fail(str(e))
    typer.echo(md, nl=False)


@app.command()
def show(
    path: str = typer.Argument(..., help="Stored note document JSON ('-' reads stdin)"),
    notes: bool = typer.Option(False, "--notes", help="Show your typed notes instead of the AI summary"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object instead of Markdown"),
    max_depth: Optional[int] = typer.Option(None, min=1, help="Deepest node nesting to accept"),
    log_level: Optional[str] = typer.Option(None, help="Log level for diagnostics on stderr"),
):
    """Show a stored meeting note.

    By default prints the AI summary panel converted to Markdown; `--notes`
    prints the typed notes instead.
    """
    configure_logging(log_level)
    raw = read_payload(path)
    try:
        note = NoteDocument.model_validate_json(raw)
    except ValidationError as e:
        fail(f"invalid note document: {e.errors(include_url=False)[0]['msg']}")

    try:
        body = note_body(note, notes=notes, max_depth=max_depth)
    except MissingContentError as e:
        err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        return
    except NotesMarkdownError as e:
        fail(str(e))

    if as_json:
        typer.echo(note_to_json(note, body))
    else:
        typer.echo(render_note(note, body))


if __name__ == "__main__":
    app()
