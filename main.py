"""Freizeitplan — Haupt-CLI.

Verwendung:
  python main.py                          = status
  python main.py status                   Freizeit-Karte für jetzt
  python main.py status --at 2025-03-03T09:00 --json
  python main.py today                    Heutiger Plan mit NOW-Markierung
  python main.py week                     Gesamter Wochenplan
  python main.py watch                    Karte alle 60 s aktualisieren
  python main.py config init              Standard-Wochenplan als YAML anlegen
  python main.py config show              Konfiguration anzeigen
  python main.py config validate <datei>  YAML-Datei prüfen
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich import box
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()

CONFIG_OPTION_HELP = "Pfad zur YAML-Konfiguration (Standard: config/schedule.yaml)."


def _load_config_or_abort(config_path: Optional[Path]):
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab.

    Ohne explizites --config wird bei fehlender Datei der Standard-Wochenplan verwendet.
    """
    from config.manager import ConfigManager
    mgr = ConfigManager(config_path)
    try:
        if config_path is None:
            return mgr.load_or_default()
        return mgr.load()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _parse_at(ctx, param, value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' ist kein ISO-Zeitpunkt (z.B. 2025-03-03T09:00)")


def _resolve_now(at: Optional[datetime], config) -> datetime:
    """Zeitpunkt der Abfrage: --at (ggf. in die Config-Zeitzone umgerechnet) oder jetzt."""
    from engine.clock import FixedClock, SystemClock

    tz = config.tzinfo
    if at is None:
        return SystemClock(tz).now()
    if at.tzinfo is not None and tz is not None:
        at = at.astimezone(tz)
    return FixedClock(at).now()


def at_option(f):
    return click.option(
        "--at", "at", callback=_parse_at, default=None,
        help="Zeitpunkt statt jetzt (ISO, z.B. 2025-03-03T17:30).",
    )(f)


def config_option(f):
    return click.option(
        "--config", "config_path", type=click.Path(path_type=Path), default=None,
        help=CONFIG_OPTION_HELP,
    )(f)


# ─── STATUS ───────────────────────────────────────────────────────────────────

@click.command("status")
@at_option
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Status als JSON ausgeben.")
@config_option
def cmd_status(at: Optional[datetime], as_json: bool, config_path: Optional[Path]):
    """Zeigt, ob wir gerade beide frei sind (oder wann als Nächstes)."""
    from engine.free_time import FreeTimeEngine
    from export.card_renderer import build_card, render_card

    config = _load_config_or_abort(config_path)
    engine = FreeTimeEngine.from_config(config)
    now = _resolve_now(at, config)
    status = engine.current_status(now)

    if as_json:
        payload = status.to_dict()
        payload["at"] = now.isoformat()
        click.echo(json.dumps(payload, ensure_ascii=False))
        return

    console.print(render_card(build_card(status, now), config.couple_name))


# ─── TODAY ────────────────────────────────────────────────────────────────────

@click.command("today")
@at_option
@config_option
def cmd_today(at: Optional[datetime], config_path: Optional[Path]):
    """Zeigt alle heutigen Freizeitfenster, das aktive mit NOW markiert."""
    from engine.free_time import FreeTimeEngine
    from export.tui_renderer import render_today_table

    config = _load_config_or_abort(config_path)
    engine = FreeTimeEngine.from_config(config)
    now = _resolve_now(at, config)
    console.print(render_today_table(engine, now))


# ─── WEEK ─────────────────────────────────────────────────────────────────────

@click.command("week")
@config_option
def cmd_week(config_path: Optional[Path]):
    """Zeigt den kompletten Wochenplan."""
    from export.tui_renderer import render_week_table

    config = _load_config_or_abort(config_path)
    console.print(render_week_table(config.to_weekly_schedule()))


# ─── WATCH ────────────────────────────────────────────────────────────────────

@click.command("watch")
@click.option("--interval", type=click.IntRange(min=1), default=None,
              help="Abfrageintervall in Sekunden (Standard aus Config, 60).")
@click.option("--count", type=click.IntRange(min=1), default=None,
              help="Nach N Aktualisierungen beenden (Standard: bis Ctrl+C).")
@config_option
def cmd_watch(interval: Optional[int], count: Optional[int], config_path: Optional[Path]):
    """Aktualisiert die Freizeit-Karte in festem Takt."""
    from engine.clock import SystemClock
    from engine.free_time import FreeTimeEngine
    from engine.poller import StatusPoller
    from export.card_renderer import build_card, render_card

    config = _load_config_or_abort(config_path)
    engine = FreeTimeEngine.from_config(config)
    clock = SystemClock(config.tzinfo)
    poller = StatusPoller(
        engine, clock,
        interval_seconds=interval or config.poll_interval_seconds,
    )

    with Live(console=console, auto_refresh=False) as live:
        def _show(status):
            card = build_card(status, poller.last_polled_at)
            live.update(render_card(card, config.couple_name), refresh=True)

        polls = poller.poll(_show, max_polls=count)
    console.print(f"[dim]{polls} Aktualisierungen.[/dim]")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen, anzeigen oder prüfen."""


@cmd_config.command("init")
@click.option("--path", "path", type=click.Path(path_type=Path), default=None,
              help=CONFIG_OPTION_HELP)
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Datei überschreiben.")
def config_init(path: Optional[Path], force: bool):
    """Legt den Standard-Wochenplan als YAML an."""
    from config.defaults import default_schedule_config
    from config.manager import ConfigManager

    mgr = ConfigManager(path)
    if not mgr.first_run_check() and not force:
        console.print(
            f"[yellow]{mgr.path} existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        sys.exit(1)
    mgr.save(default_schedule_config())


@cmd_config.command("show")
@config_option
def config_show(config_path: Optional[Path]):
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config_or_abort(config_path)

    console.print(Panel(
        f"[bold]{escape(config.couple_name)}[/bold]  |  "
        f"Zeitzone: {config.timezone or 'System'}  |  "
        f"Polling: {config.poll_interval_seconds}s",
        title="Konfiguration",
        border_style="cyan",
    ))

    table = Table(title="Freizeitfenster", box=box.ROUNDED)
    table.add_column("Nr.")
    table.add_column("Tag")
    table.add_column("Beginn")
    table.add_column("Ende")
    for day in sorted(config.days, key=lambda d: d.weekday):
        for slot in day.slots:
            table.add_row(str(day.weekday), day.day_name, slot.start, slot.end)
    console.print(table)


@cmd_config.command("validate")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
def config_validate(datei: Path):
    """Prüft eine YAML-Konfiguration."""
    from config.manager import ConfigManager

    try:
        config = ConfigManager(datei).load()
    except ValueError as e:
        console.print(f"[red bold]Ungültig:[/red bold]\n{escape(str(e))}")
        sys.exit(1)
    total = sum(len(d.slots) for d in config.days)
    console.print(f"[green]✓[/green] Gültig: {len(config.days)} Tage, {total} Slots")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Debug-Logging aktivieren.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Freizeitplan: Wann haben wir beide frei?

    Starten Sie mit: python main.py status
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_status)


def main():
    """Einstiegspunkt. Ohne Unterbefehl wird 'status' ausgeführt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_status)
cli.add_command(cmd_today)
cli.add_command(cmd_week)
cli.add_command(cmd_watch)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
