"""Entry point for the focusflow CLI.

Usage:
    python -m focusflow.interfaces.cli.main

Or via installed entry point:
    focusflow <command>
"""

from focusflow.interfaces.cli import app


def main() -> None:
    """Run the focusflow CLI application."""
    app()


if __name__ == "__main__":
    main()
