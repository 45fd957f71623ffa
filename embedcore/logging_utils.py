"""
logging_utils.py

Logging helpers for the embedcore command-line interface.

The core (collection, embeddable, pipeline) is pure and never logs: errors
are raised to the caller instead. Progress output belongs to the CLI layer
only, and goes through Typer so it stays consistent with command output.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what the CLI is doing
        (e.g., "Loading document...", "Extracting fragments...").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing. Messages go to stderr so stdout stays machine-readable.
    """
    if verbose:
        typer.echo(message, err=True)


def log_error(message: str) -> None:
    """Print an error message to stderr."""
    typer.echo(message, err=True)
