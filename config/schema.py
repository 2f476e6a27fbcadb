import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator

from models.day_schedule import DaySchedule, WeeklySchedule
from models.timeslot import TimeSlot

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_hhmm(value: str) -> tuple[int, int]:
    """Zerlegt "HH:MM" in (Stunde, Minute) und prüft die Wertebereiche."""
    m = _HHMM.match(value.strip())
    if not m:
        raise ValueError(f"Uhrzeit '{value}' nicht im Format HH:MM")
    hour, minute = int(m.group(1)), int(m.group(2))
    if not 0 <= hour <= 23:
        raise ValueError(f"Stunde {hour} außerhalb 0-23 ('{value}')")
    if not 0 <= minute <= 59:
        raise ValueError(f"Minute {minute} außerhalb 0-59 ('{value}')")
    return hour, minute


# ─── ZEITFENSTER ───

class SlotConfig(BaseModel):
    """Ein gemeinsames Freizeitfenster. Ende "23:59" = bis Tagesende."""
    # Beginn im Format "HH:MM"
    start: str
    # Ende im Format "HH:MM"
    end: str

    @field_validator("start", "end")
    @classmethod
    def _check_format(cls, v: str) -> str:
        hour, minute = parse_hhmm(v)
        return f"{hour:02d}:{minute:02d}"

    @model_validator(mode='after')
    def _check_order(self):
        if parse_hhmm(self.start) > parse_hhmm(self.end):
            raise ValueError(f"Beginn {self.start} liegt nach Ende {self.end}")
        return self

    def to_time_slot(self) -> TimeSlot:
        sh, sm = parse_hhmm(self.start)
        eh, em = parse_hhmm(self.end)
        return TimeSlot(start_hour=sh, start_minute=sm, end_hour=eh, end_minute=em)


# ─── TAGE ───

class DayConfig(BaseModel):
    """Ein Wochentag mit seinen Freizeitfenstern."""
    # Wochentag: 1=Sonntag, 2=Montag, ..., 7=Samstag
    weekday: int = Field(ge=1, le=7,
        description="Wochentag (1=Sonntag ... 7=Samstag)")
    # Anzeigename, z.B. "Monday"
    day_name: str
    # Chronologisch sortiert, nicht überlappend
    slots: list[SlotConfig] = Field(default_factory=list)

    @model_validator(mode='after')
    def _check_slots_sorted(self):
        """Slots müssen aufsteigend und überlappungsfrei sein."""
        time_slots = [s.to_time_slot() for s in self.slots]
        for prev, cur in zip(time_slots, time_slots[1:]):
            if cur.start_minutes < prev.end_minutes:
                raise ValueError(
                    f"{self.day_name}: Slot {cur!r} überlappt mit {prev!r} "
                    f"oder ist nicht chronologisch sortiert"
                )
        return self

    def to_day_schedule(self) -> DaySchedule:
        return DaySchedule(
            day_name=self.day_name,
            slots=tuple(s.to_time_slot() for s in self.slots),
        )


# ─── GESAMT-CONFIG ───

class ScheduleConfig(BaseModel):
    """Gesamtkonfiguration: wer, wo (Zeitzone), wie oft pollen, welcher Wochenplan."""
    # Anzeigename des Paares
    couple_name: str = Field("Us", description="Name des Paares")
    # IANA-Zeitzone, z.B. "Europe/Berlin". None = lokale Systemzeit
    timezone: Optional[str] = Field(None,
        description="IANA-Zeitzone (leer = Systemzeit)")
    # Abfrageintervall für 'watch' in Sekunden
    poll_interval_seconds: int = Field(60, ge=5, le=3600,
        description="Polling-Intervall (Sekunden)")
    # Wochenplan
    days: list[DayConfig] = Field(default_factory=list,
        description="Freizeitfenster pro Wochentag")

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unbekannte Zeitzone: {v}") from e
        return v

    @model_validator(mode='after')
    def _check_unique_weekdays(self):
        seen: set[int] = set()
        for d in self.days:
            if d.weekday in seen:
                raise ValueError(f"Wochentag {d.weekday} ({d.day_name}) doppelt definiert")
            seen.add(d.weekday)
        return self

    @property
    def tzinfo(self) -> Optional[ZoneInfo]:
        return ZoneInfo(self.timezone) if self.timezone else None

    def to_weekly_schedule(self) -> WeeklySchedule:
        return WeeklySchedule({d.weekday: d.to_day_schedule() for d in self.days})
