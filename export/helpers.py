"""Gemeinsame Hilfsfunktionen für Karte und Tabellen."""

from datetime import date, datetime, timedelta

from models.status import (
    CurrentlyFree,
    DayOver,
    FreeTimeStatus,
    NextSlotOtherDay,
    NextSlotToday,
)

# ─── Farbpalette (rich-Farbnamen) ─────────────────────────────────────────────

STYLES: dict[str, str] = {
    "currently_free":      "bold magenta",
    "day_over":            "bold salmon1",
    "next_slot_today":     "bold medium_purple1",
    "next_slot_other_day": "bold light_slate_blue",
    "no_schedule":         "grey50",
    "now":                 "bold hot_pink",
}


# ─── Datumsformate ────────────────────────────────────────────────────────────

def format_date_label(d: date) -> str:
    """Kurzes Datum wie "Mon, Oct 19" (Tag ohne führende Null)."""
    return f"{d:%a}, {d:%b} {d.day}"


def status_date_label(status: FreeTimeStatus, now: datetime) -> str:
    """Datum, auf das sich der Status bezieht.

    Für NextSlotOtherDay: heute + days_ahead. NoSchedule: leer.
    """
    if isinstance(status, NextSlotOtherDay):
        return format_date_label((now + timedelta(days=status.days_ahead)).date())
    if isinstance(status, (CurrentlyFree, DayOver, NextSlotToday)):
        return format_date_label(now.date())
    return ""


# ─── Dauer ────────────────────────────────────────────────────────────────────

def format_minutes(minutes: int) -> str:
    """Dauer als "2h 30min", "45min" oder "3h"."""
    hours, rest = divmod(minutes, 60)
    if hours and rest:
        return f"{hours}h {rest}min"
    if hours:
        return f"{hours}h"
    return f"{rest}min"
