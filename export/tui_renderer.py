"""Gemeinsamer Renderer für Terminal-Anzeige von Tages- und Wochenplan.

Wird von cmd_today und cmd_week (Rich) verwendet.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from rich import box
from rich.table import Table

from export.helpers import STYLES, format_minutes
from models.day_schedule import MONDAY, WEEKDAYS

if TYPE_CHECKING:
    from engine.free_time import FreeTimeEngine
    from models.day_schedule import WeeklySchedule

NO_SLOTS_TODAY = "No free time scheduled for today"


def render_today_rows(engine: "FreeTimeEngine", now: datetime) -> list[list[str]]:
    """Gibt Tabellenzeilen für den heutigen Plan zurück.

    Jede Zeile: [marker, time_string, note]
    Der gerade aktive Slot bekommt "NOW", alle anderen "⏰".
    Leere Liste wenn für heute nichts eingetragen ist.
    """
    today = engine.today_schedule(now)
    if today is None or today.is_empty:
        return []

    active = engine.active_slot(now)
    rows: list[list[str]] = []
    for slot in today.slots:
        if slot == active:
            rows.append(["NOW", slot.time_string, "Currently active! 💕"])
        else:
            rows.append(["⏰", slot.time_string, "Free time together"])
    return rows


def render_today_table(engine: "FreeTimeEngine", now: datetime) -> Table:
    today = engine.today_schedule(now)
    day_name = today.day_name if today is not None else "Today"
    table = Table(title=f"{day_name}'s Love Time", box=box.ROUNDED)
    table.add_column("", justify="center")
    table.add_column("Zeit")
    table.add_column("")

    rows = render_today_rows(engine, now)
    if not rows:
        table.add_row("😔", NO_SLOTS_TODAY, "But we'll find time anyway! 💖")
        return table
    for marker, time_string, note in rows:
        style = STYLES["now"] if marker == "NOW" else None
        table.add_row(marker, time_string, note, style=style)
    return table


def render_week_rows(weekly: "WeeklySchedule") -> list[list[str]]:
    """Eine Zeile pro Wochentag, Montag zuerst.

    Jede Zeile: [day_name, slots (zeilenweise), Summe]
    Tage ohne Slots erscheinen mit "—", Tage ohne Eintrag fehlen.
    """
    # Anzeige-Reihenfolge Mo..So, intern bleibt Sonntag=1
    order = [wd for wd in WEEKDAYS if wd >= MONDAY] + [wd for wd in WEEKDAYS if wd < MONDAY]
    rows: list[list[str]] = []
    for wd in order:
        day = weekly.get(wd)
        if day is None:
            continue
        if day.is_empty:
            rows.append([day.day_name, "—", "—"])
            continue
        slots = "\n".join(s.time_string for s in day.slots)
        rows.append([day.day_name, slots, format_minutes(day.total_minutes)])
    return rows


def render_week_table(weekly: "WeeklySchedule") -> Table:
    table = Table(title="Wochenplan", box=box.ROUNDED)
    table.add_column("Tag", style="bold")
    table.add_column("Freizeit")
    table.add_column("Summe", justify="right")
    for row in render_week_rows(weekly):
        table.add_row(*row)
    return table
