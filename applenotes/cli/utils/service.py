"""Utility functions shared by the applenotes CLI commands."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from applenotes.exceptions import AppleNotesUnavailable
from applenotes.services.notes import NotesService, NotesSettings
from applenotes.services.notes.scripting import ensure_osascript

console = Console()

# State storage
config_dir = os.path.expanduser(
    os.getenv("APPLENOTES_CONFIG_DIR") or "~/.config/applenotes"
)
config_path = os.path.join(config_dir, "config.json")


def setup_logging(verbose: bool = False) -> None:
    """Route library logs through rich."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    if verbose:
        logging.getLogger("applenotes").setLevel(logging.DEBUG)


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    try:
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
            console.print("[yellow]Warning:[/yellow] Config file is not a JSON object")
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        Path(config_dir).mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
    except OSError as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not save config file: {exc}")


def read_content(content: Optional[str], file: Optional[Path]) -> str:
    """Note body from ``--file``, from stdin when ``content`` is "-", else as given."""
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] Could not read {file}: {exc}")
            raise typer.Exit(1)
    if content == "-":
        return typer.get_text_stream("stdin").read()
    return content or ""


def get_settings(account: Optional[str] = None) -> NotesSettings:
    """Environment, then config file, then the explicit ``--account``."""
    settings = NotesSettings.from_env().merged(load_config())
    if account is not None:
        settings = settings.merged({"account": account})
    return settings


def get_service(account: Optional[str] = None) -> NotesService:
    """Build a NotesService or exit when Notes cannot be scripted here."""
    settings = get_settings(account)
    try:
        ensure_osascript(settings.osascript)
    except AppleNotesUnavailable as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(1)
    return NotesService(settings=settings)
