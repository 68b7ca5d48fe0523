"""Preference CLI commands."""

import typer

from focusflow.global_config import get_config_dir, get_preferences, save_preferences
from focusflow.i18n import CATALOGS
from focusflow.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Preference commands")


@app.command("show")
def show() -> None:
    """Print the current preferences."""
    prefs = get_preferences()
    typer.echo(f"config dir:     {get_config_dir()}")
    typer.echo(f"language:       {prefs.language}")
    typer.echo(f"focus minutes:  {prefs.focus_minutes}")
    typer.echo(f"log level:      {prefs.log_level}")


@app.command("language")
def language(lang: str = typer.Argument(..., help="Language code (en or zh)")) -> None:
    """Set the label language."""
    if lang not in CATALOGS:
        print_error(f"Unsupported language: {lang} (choose from {', '.join(CATALOGS)})")
        raise typer.Exit(1)

    prefs = get_preferences().model_copy(update={"language": lang})
    save_preferences(prefs)
    print_success(f"Language set to {lang}")


@app.command("focus-minutes")
def focus_minutes(minutes: int = typer.Argument(..., help="Default session length")) -> None:
    """Set the default focus session length."""
    if minutes < 1:
        print_error("Focus length must be at least 1 minute")
        raise typer.Exit(1)

    prefs = get_preferences().model_copy(update={"focus_minutes": minutes})
    save_preferences(prefs)
    print_success(f"Focus length set to {minutes} minutes")
