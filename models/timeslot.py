"""Datenmodell für ein gemeinsames Freizeitfenster innerhalb eines Tages."""

from dataclasses import dataclass

# Minuten eines vollen Tages (obere Grenze für "onwards"-Slots)
MINUTES_PER_DAY = 24 * 60


def format_12h(hour: int, minute: int) -> str:
    """Formatiert eine Uhrzeit im 12-Stunden-Format, z.B. "5:10 PM"."""
    period = "PM" if hour >= 12 else "AM"
    if hour == 0:
        display_hour = 12
    elif hour > 12:
        display_hour = hour - 12
    else:
        display_hour = hour
    return f"{display_hour}:{minute:02d} {period}"


@dataclass(frozen=True)
class TimeSlot:
    """Halboffenes Zeitfenster [Beginn, Ende) an einem Tag.

    Ein Ende von 23:59 ist eine Markierung für "bis Tagesende": der Slot
    gilt dann bis Mitternacht einschließlich der Minute 23:59.
    Immutable (frozen=True) damit es als Dict-Key / Set-Element nutzbar ist.
    Wertebereiche werden hier nicht geprüft, das übernimmt config.schema.
    """

    # Beginn (Stunde 0-23, Minute 0-59)
    start_hour: int
    start_minute: int
    # Ende (Stunde 0-23, Minute 0-59); 23:59 = offen bis Tagesende
    end_hour: int
    end_minute: int

    @property
    def is_open_ended(self) -> bool:
        """True wenn das Ende die 23:59-Markierung ist."""
        return self.end_hour == 23 and self.end_minute == 59

    @property
    def start_minutes(self) -> int:
        """Beginn in Minuten seit Mitternacht."""
        return self.start_hour * 60 + self.start_minute

    @property
    def end_minutes(self) -> int:
        """Ende in Minuten seit Mitternacht (1440 für offene Slots)."""
        if self.is_open_ended:
            return MINUTES_PER_DAY
        return self.end_hour * 60 + self.end_minute

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def time_string(self) -> str:
        """Anzeigetext, z.B. "9:00 AM - 5:10 PM" oder "12:00 AM - onwards"."""
        start = format_12h(self.start_hour, self.start_minute)
        if self.is_open_ended:
            end = "onwards"
        else:
            end = format_12h(self.end_hour, self.end_minute)
        return f"{start} - {end}"

    def __repr__(self) -> str:
        return (
            f"TimeSlot({self.start_hour:02d}:{self.start_minute:02d}"
            f"–{self.end_hour:02d}:{self.end_minute:02d})"
        )

    def __str__(self) -> str:
        return self.time_string
