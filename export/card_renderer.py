"""Freizeit-Karte: Status → Titel, Untertitel, Detailtext, Emoji, Datum.

build_card() ist reine Textlogik (testbar ohne Terminal),
render_card() baut daraus ein Rich-Panel.
"""

from dataclasses import dataclass
from datetime import datetime

from rich.panel import Panel
from rich.text import Text

from export.helpers import STYLES, status_date_label
from models.status import (
    CurrentlyFree,
    DayOver,
    FreeTimeStatus,
    NextSlotOtherDay,
    NextSlotToday,
)


@dataclass(frozen=True)
class FreeTimeCard:
    """Anzeigefertiger Inhalt der Karte."""

    title: str
    subtitle: str
    detail: str
    emoji: str
    date_label: str
    style: str


def build_card(status: FreeTimeStatus, now: datetime) -> FreeTimeCard:
    """Übersetzt einen Status in die Texte der Karte."""
    date_label = status_date_label(status, now)
    style = STYLES[status.kind]

    if isinstance(status, CurrentlyFree):
        return FreeTimeCard(
            title="We're Both Free Now! 💖",
            subtitle=status.slot.time_string,
            detail="Perfect time to spend together! 💖✨",
            emoji="✨",
            date_label=date_label,
            style=style,
        )
    if isinstance(status, DayOver):
        return FreeTimeCard(
            title="College is Over!",
            subtitle="Time to be together before hostel! 🏠",
            detail="Enjoying our moments together! 💕",
            emoji="🏠",
            date_label=date_label,
            style=style,
        )
    if isinstance(status, NextSlotToday):
        return FreeTimeCard(
            title="Next Free Time Today",
            subtitle=status.slot.time_string,
            detail="Looking forward to our time together! 🥰",
            emoji="💫",
            date_label=date_label,
            style=style,
        )
    if isinstance(status, NextSlotOtherDay):
        return FreeTimeCard(
            title="Next Free Tomorrow" if status.days_ahead == 1 else "Next Free Time",
            subtitle=status.slot.time_string,
            detail="Can't wait to see you, my love! 💝",
            emoji="🌟",
            date_label=date_label,
            style=style,
        )
    return FreeTimeCard(
        title="Schedule Loading...",
        subtitle="Checking your schedule...",
        detail="",
        emoji="💤",
        date_label=date_label,
        style=style,
    )


def render_card(card: FreeTimeCard, couple_name: str = "") -> Panel:
    """Rich-Panel für die Karte."""
    body = Text()
    body.append(f"{card.emoji}  {card.title}\n", style=card.style)
    body.append(card.subtitle)
    if card.detail:
        body.append(f"\n\n♥ {card.detail} ♥", style="italic")
    return Panel(
        body,
        title=Text(couple_name) if couple_name else None,
        subtitle=Text(card.date_label) if card.date_label else None,
        border_style=card.style.replace("bold ", ""),
        padding=(1, 3),
    )
