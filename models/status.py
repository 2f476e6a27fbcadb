"""Ergebnis einer Statusabfrage: wann haben wir beide frei?

FreeTimeStatus ist eine Tagged Union aus fünf Varianten. Jede Variante ist
eine eigene frozen-Dataclass mit einem ``kind``-Diskriminator; es gibt keine
gemeinsame Basisklasse. Unterschieden wird per ``isinstance`` oder ``kind``.
"""

from dataclasses import dataclass, field
from typing import Literal, Union

from models.timeslot import TimeSlot


def _slot_dict(slot: TimeSlot) -> dict:
    return {
        "start": f"{slot.start_hour:02d}:{slot.start_minute:02d}",
        "end": f"{slot.end_hour:02d}:{slot.end_minute:02d}",
        "time_string": slot.time_string,
    }


@dataclass(frozen=True)
class NoSchedule:
    """Für heute (bzw. die ganze Woche) ist kein Plan eingetragen."""

    kind: Literal["no_schedule"] = field(default="no_schedule", init=False)

    def to_dict(self) -> dict:
        return {"kind": self.kind}


@dataclass(frozen=True)
class DayOver:
    """Aktiver Slot, aber die 17:10-Grenze (Wohnheim) ist erreicht."""

    kind: Literal["day_over"] = field(default="day_over", init=False)

    def to_dict(self) -> dict:
        return {"kind": self.kind}


@dataclass(frozen=True)
class CurrentlyFree:
    """Wir befinden uns gerade in einem gemeinsamen Slot."""

    slot: TimeSlot
    day_name: str
    kind: Literal["currently_free"] = field(default="currently_free", init=False)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "day_name": self.day_name, "slot": _slot_dict(self.slot)}


@dataclass(frozen=True)
class NextSlotToday:
    """Gerade nicht frei, aber heute kommt noch ein Slot."""

    slot: TimeSlot
    day_name: str
    kind: Literal["next_slot_today"] = field(default="next_slot_today", init=False)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "day_name": self.day_name, "slot": _slot_dict(self.slot)}


@dataclass(frozen=True)
class NextSlotOtherDay:
    """Heute kein Slot mehr; erster Slot eines folgenden Tages.

    days_ahead = 1 bedeutet morgen.
    """

    slot: TimeSlot
    day_name: str
    days_ahead: int
    kind: Literal["next_slot_other_day"] = field(default="next_slot_other_day", init=False)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "day_name": self.day_name,
            "days_ahead": self.days_ahead,
            "slot": _slot_dict(self.slot),
        }


FreeTimeStatus = Union[NoSchedule, DayOver, CurrentlyFree, NextSlotToday, NextSlotOtherDay]
