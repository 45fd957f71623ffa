"""
Command-line interface for embedcore.

    from embedcore.cli import cli
"""

from .main import cli

__all__ = ["cli"]
