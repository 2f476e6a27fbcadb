from config.schema import DayConfig, ScheduleConfig, SlotConfig


def default_days() -> list[DayConfig]:
    """Standard-Wochenplan (Vorlesungszeiten + Wohnheim).

    Mo  08:00-10:30, 12:10-13:50, 14:40-15:30, 17:10-open
    Di  13:00-13:50
    Mi  08:00-08:50, 13:00-13:50, 16:20-open
    Do  08:00-08:50, 13:00-13:50, 17:10-open
    Fr  13:00-13:50, 17:10-open
    Sa  ganztägig
    So  ganztägig

    "open" = Ende 23:59, der Slot läuft bis Mitternacht.
    """
    def slot(start: str, end: str) -> SlotConfig:
        return SlotConfig(start=start, end=end)

    return [
        DayConfig(weekday=2, day_name="Monday", slots=[
            slot("08:00", "10:30"),
            slot("12:10", "13:50"),
            slot("14:40", "15:30"),
            slot("17:10", "23:59"),
        ]),
        DayConfig(weekday=3, day_name="Tuesday", slots=[
            slot("13:00", "13:50"),
        ]),
        DayConfig(weekday=4, day_name="Wednesday", slots=[
            slot("08:00", "08:50"),
            slot("13:00", "13:50"),
            slot("16:20", "23:59"),
        ]),
        DayConfig(weekday=5, day_name="Thursday", slots=[
            slot("08:00", "08:50"),
            slot("13:00", "13:50"),
            slot("17:10", "23:59"),
        ]),
        DayConfig(weekday=6, day_name="Friday", slots=[
            slot("13:00", "13:50"),
            slot("17:10", "23:59"),
        ]),
        DayConfig(weekday=7, day_name="Saturday", slots=[
            slot("00:00", "23:59"),
        ]),
        DayConfig(weekday=1, day_name="Sunday", slots=[
            slot("00:00", "23:59"),
        ]),
    ]


def default_schedule_config() -> ScheduleConfig:
    """Vollständige Default-Konfiguration."""
    return ScheduleConfig(
        couple_name="Us",
        timezone=None,
        poll_interval_seconds=60,
        days=default_days(),
    )
