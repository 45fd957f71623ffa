"""
fragments_cli.py

Typer command group for extracting embeddable fragments from a JSON document.

This is the command-line view of what the embedding pipeline sees: the
ordered list of text fragments, one per future embedding vector.

    embedcore fragments run --input-path notes.json
    embedcore fragments run --input-path notes.json --per-item --verbose

Each fragment is written to stdout as one JSON object per line, so the output
can be piped straight into a batching or embedding step.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import typer

from embedcore import config
from embedcore.collection import NonEmptyCollection
from embedcore.embeddable import EmbeddableSequence, JsonValue, to_fragments
from embedcore.errors import EmbeddableError
from embedcore.logging_utils import log_error, log_verbose

# ---------------------------------------------------------------------------
# Create the Typer sub-application for `embedcore fragments`
# ---------------------------------------------------------------------------
fragments_app = typer.Typer(
    help=(
        "Extract ordered embedding fragments from a JSON document.\n\n"
        "Without --per-item, the whole document is converted at once: a "
        "top-level array follows the sequence rule (every item in order), "
        "anything else becomes a single canonical JSON fragment.\n\n"
        "With --per-item, each item of a top-level array is converted on its "
        "own and its index is included in the output."
    )
)

_SCALARS = (str, bool, int, float)


def _as_embeddable(value: Any, ensure_ascii: bool) -> Any:
    # Scalars keep their plain textual form; everything else is structured.
    if isinstance(value, _SCALARS):
        return value
    return JsonValue(value, ensure_ascii=ensure_ascii)


def extract_fragments(
    document: Any,
    per_item: bool = False,
    ensure_ascii: bool = False,
) -> List[Dict[str, Any]]:
    """
    Convert a loaded JSON document into fragment records.

    Returns
    -------
    List[Dict[str, Any]]
        One record per fragment, in order:
            { "position": int, "fragment": str }
        plus "item" (the top-level array index) in per-item mode.

    Raises
    ------
    EmbeddableError
        If any fragment cannot be produced, or the document yields no
        fragments at all (EmptyInputError). No partial output is returned.
    typer.BadParameter
        If per-item mode is requested for a document that is not an array.
    """
    if not per_item:
        if isinstance(document, list):
            target: Any = EmbeddableSequence(
                _as_embeddable(item, ensure_ascii) for item in document
            )
        else:
            target = _as_embeddable(document, ensure_ascii)

        return [
            {"position": i, "fragment": text}
            for i, text in enumerate(to_fragments(target).all())
        ]

    if not isinstance(document, list):
        raise typer.BadParameter("--per-item requires a top-level JSON array.")

    records: List[Dict[str, Any]] = []
    for index, item in enumerate(document):
        for text in to_fragments(_as_embeddable(item, ensure_ascii)).all():
            records.append({"item": index, "position": len(records), "fragment": text})
    # An empty array has no fragments; from_sequence reports it as EmptyInputError.
    return NonEmptyCollection.from_sequence(records).all()


# ---------------------------------------------------------------------------
# `embedcore fragments run`
# ---------------------------------------------------------------------------
@fragments_app.command("run")
def fragments_run(
    input_path: Path = typer.Option(
        ...,
        "--input-path",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the JSON document to extract fragments from.",
    ),
    per_item: bool = typer.Option(
        False,
        "--per-item",
        help="Convert each item of a top-level array separately.",
    ),
    verbose: bool = typer.Option(
        config.VERBOSE,
        "--verbose",
        "-v",
        help="Print progress messages to stderr.",
    ),
) -> None:
    """
    Print the ordered fragments of a JSON document, one JSON object per line.

    Exits with code 1 when the file is not valid UTF-8 JSON, or when a
    fragment cannot be produced (for example an empty top-level array, or a
    number that JSON cannot represent).
    """
    log_verbose(f"Loading document from: {input_path}", verbose)
    try:
        document = json.loads(input_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        log_error(f"Error: invalid JSON document {input_path}: {exc}")
        raise typer.Exit(code=1)

    log_verbose("Extracting fragments...", verbose)
    try:
        records = extract_fragments(
            document,
            per_item=per_item,
            ensure_ascii=config.JSON_ENSURE_ASCII,
        )
    except EmbeddableError as exc:
        log_error(f"Error: {exc}")
        raise typer.Exit(code=1)

    for record in records:
        typer.echo(json.dumps(record, ensure_ascii=config.JSON_ENSURE_ASCII))

    log_verbose(f"Extracted {len(records)} fragments.", verbose)
