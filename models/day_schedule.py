"""Tages- und Wochenplan der gemeinsamen Freizeit."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from models.timeslot import TimeSlot

# Wochentag-Nummerierung (wie Kalender-Weekday): 1=Sonntag, 2=Montag, ..., 7=Samstag
SUNDAY = 1
MONDAY = 2
SATURDAY = 7
WEEKDAYS = range(SUNDAY, SATURDAY + 1)


@dataclass(frozen=True)
class DaySchedule:
    """Benannter Tag mit chronologisch sortierten, überlappungsfreien Slots.

    Die Sortierung wird zur Laufzeit nicht geprüft; sie ist Aufgabe der
    Konfiguration (siehe config.schema.DayConfig).
    """

    day_name: str
    slots: tuple[TimeSlot, ...] = ()

    def __post_init__(self) -> None:
        # Listen zu Tupeln normalisieren, damit der Plan unveränderlich bleibt
        object.__setattr__(self, "slots", tuple(self.slots))

    @property
    def is_empty(self) -> bool:
        return not self.slots

    @property
    def total_minutes(self) -> int:
        """Summe aller Slot-Dauern in Minuten."""
        return sum(s.duration_minutes for s in self.slots)


class WeeklySchedule:
    """Unveränderliche Zuordnung Wochentag (1-7, Sonntag=1) → DaySchedule.

    Wird einmal beim Start aufgebaut und danach nur noch gelesen; darf
    ohne Locking aus mehreren Threads abgefragt werden.
    """

    def __init__(self, days: Mapping[int, DaySchedule]) -> None:
        self._days: Mapping[int, DaySchedule] = MappingProxyType(dict(days))

    def get(self, weekday: int) -> Optional[DaySchedule]:
        """Gibt den Tagesplan zurück oder None, wenn für den Tag nichts eingetragen ist."""
        return self._days.get(weekday)

    def __contains__(self, weekday: object) -> bool:
        return weekday in self._days

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._days))

    def __len__(self) -> int:
        return len(self._days)

    def items(self) -> list[tuple[int, DaySchedule]]:
        """Alle Einträge, sortiert nach Wochentag-Nummer."""
        return [(wd, self._days[wd]) for wd in self]

    def __repr__(self) -> str:
        names = ", ".join(d.day_name for _, d in self.items())
        return f"WeeklySchedule({names})"
