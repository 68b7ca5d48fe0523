"""Interfaces layer for focusflow.

Adapters for external interaction. Currently the command-line front end
(Typer), which:
- accepts user input and validates it
- calls application services
- formats output for the user
"""

from focusflow.interfaces.cli import app

__all__ = ["app"]
