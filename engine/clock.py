"""Zeitquellen für die Statusabfrage.

Die Engine liest nie selbst die Systemuhr; sie bekommt einen Zeitpunkt
übergeben. Wer pollt, holt ihn sich aus einer Clock.
"""

from datetime import datetime
from typing import Optional, Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Aktuelle Wanduhrzeit, optional in einer festen Zeitzone.

    Ohne Zeitzone wird die lokale Zeitzone des Systems verwendet.
    """

    def __init__(self, tz: Optional[ZoneInfo] = None) -> None:
        self.tz = tz

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now().astimezone()
        return datetime.now(self.tz)


class FixedClock:
    """Eingefrorene Zeit (Tests, ``--at``)."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def calendar_weekday(moment: datetime) -> int:
    """Wochentag im Kalender-Schema 1=Sonntag, 2=Montag, ..., 7=Samstag.

    isoweekday() liefert 1=Montag..7=Sonntag; % 7 + 1 verschiebt um einen Tag.
    """
    return moment.isoweekday() % 7 + 1


def minutes_since_midnight(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute
