"""Freizeit-Engine: Wann haben wir beide gerade / als Nächstes frei?

Reine Funktion aus (Wochenplan, Zeitpunkt). Kein Timer, kein Zustand
außer dem unveränderlichen Wochenplan. Wer aktuelle Werte braucht,
ruft current_status() periodisch auf (siehe engine.poller).

Ablauf von current_status():
1. Wochentag bestimmen; kein Eintrag → NoSchedule
2. Aktiver Slot heute → DayOver (ab Wohnheim-Grenze) oder CurrentlyFree
3. Späterer Slot heute → NextSlotToday
4. Bis zu 7 Tage vorwärts (Wrap Samstag → Sonntag) → NextSlotOtherDay
5. Nichts gefunden → NoSchedule
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from engine.clock import calendar_weekday, minutes_since_midnight
from models.day_schedule import DaySchedule, WeeklySchedule
from models.status import (
    CurrentlyFree,
    DayOver,
    FreeTimeStatus,
    NextSlotOtherDay,
    NextSlotToday,
    NoSchedule,
)
from models.timeslot import TimeSlot

if TYPE_CHECKING:
    from config.schema import ScheduleConfig

logger = logging.getLogger(__name__)

# Wohnheim-Grenze: ab hier ist die gemeinsame Zeit des Tages vorbei
DAY_OVER_HOUR = 17
DAY_OVER_MINUTE = 10


def is_active(slot: TimeSlot, now: datetime) -> bool:
    """True wenn ``now`` in [Beginn, Ende) des Slots liegt.

    Der Beginn zählt als aktiv, das Ende nicht. Slots mit Ende 23:59
    laufen bis Mitternacht (Ende = 1440 Minuten).
    """
    current = minutes_since_midnight(now)
    return slot.start_minutes <= current < slot.end_minutes


def is_day_over(now: datetime) -> bool:
    # Stunde und Minute werden einzeln verglichen: 17:05 und 18:00 sind kein DayOver.
    return now.hour >= DAY_OVER_HOUR and now.minute >= DAY_OVER_MINUTE


def current_status(weekly: WeeklySchedule, now: datetime) -> FreeTimeStatus:
    """Berechnet den Freizeit-Status zum Zeitpunkt ``now``. Wirft nie."""
    weekday = calendar_weekday(now)
    today = weekly.get(weekday)
    if today is None:
        logger.debug(f"Kein Plan für Wochentag {weekday}")
        return NoSchedule()

    # ── Gerade frei? ──
    active = next((s for s in today.slots if is_active(s, now)), None)
    if active is not None:
        if is_day_over(now):
            return DayOver()
        return CurrentlyFree(active, today.day_name)

    # ── Später heute? ──
    current = minutes_since_midnight(now)
    upcoming = next((s for s in today.slots if s.start_minutes > current), None)
    if upcoming is not None:
        return NextSlotToday(upcoming, today.day_name)

    # ── Folgende Tage (Tag 7 ist wieder heute) ──
    next_day = weekday % 7 + 1
    days_ahead = 1
    while days_ahead <= 7:
        schedule = weekly.get(next_day)
        if schedule is not None and schedule.slots:
            return NextSlotOtherDay(schedule.slots[0], schedule.day_name, days_ahead)
        next_day = next_day % 7 + 1
        days_ahead += 1

    logger.debug("Keine Slots in der gesamten Woche gefunden")
    return NoSchedule()


class FreeTimeEngine:
    """Hält den Wochenplan und beantwortet Statusabfragen.

    Wird einmal beim Start erzeugt und an alle Verbraucher (CLI, Poller,
    Renderer) durchgereicht.
    """

    def __init__(self, weekly: WeeklySchedule) -> None:
        self.weekly = weekly

    @classmethod
    def from_config(cls, config: "ScheduleConfig") -> "FreeTimeEngine":
        weekly = config.to_weekly_schedule()
        logger.info(f"Wochenplan geladen: {len(weekly)} Tage")
        return cls(weekly)

    def current_status(self, now: datetime) -> FreeTimeStatus:
        status = current_status(self.weekly, now)
        logger.debug(f"Status {now:%a %H:%M}: {status.kind}")
        return status

    def today_schedule(self, now: datetime) -> Optional[DaySchedule]:
        """Tagesplan für den Wochentag von ``now`` (None wenn nicht eingetragen)."""
        return self.weekly.get(calendar_weekday(now))

    def active_slot(self, now: datetime) -> Optional[TimeSlot]:
        """Der heute gerade aktive Slot, unabhängig von der Wohnheim-Grenze."""
        today = self.today_schedule(now)
        if today is None:
            return None
        return next((s for s in today.slots if is_active(s, now)), None)
