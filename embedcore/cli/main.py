"""
Root entrypoint for the embedcore CLI.

This module defines the top-level `embedcore` command and mounts sub-apps
from other modules under embedcore/cli/:

    • embedcore/cli/fragments_cli.py  →  `embedcore fragments ...`

Environment variables (see embedcore/config.py) are loaded from `.env`
before any command runs.
"""

# ---------------------------------------------------------------------------
# Imports (must be at top to satisfy flake8 E402)
# ---------------------------------------------------------------------------
from dotenv import load_dotenv
import typer

from .fragments_cli import fragments_app

# Load environment variables
load_dotenv()

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "embedcore command-line interface.\n\n"
        "Inspect the ordered text fragments that the embedding pipeline "
        "would send to a model:\n\n"
        "      embedcore fragments run --input-path <document.json>"
    )
)

# ---------------------------------------------------------------------------
# Register sub-applications
# ---------------------------------------------------------------------------
cli.add_typer(fragments_app, name="fragments")

# ---------------------------------------------------------------------------
# Entry point for `python -m embedcore.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
