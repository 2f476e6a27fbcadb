"""Tests für die Freizeit-Engine: Slot-Grenzen, Statuslogik, Polling."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from config.defaults import default_schedule_config
from engine.clock import FixedClock, SystemClock, calendar_weekday
from engine.free_time import FreeTimeEngine, current_status, is_active
from engine.poller import StatusPoller
from models.day_schedule import DaySchedule, WeeklySchedule
from models.status import (
    CurrentlyFree,
    DayOver,
    NextSlotOtherDay,
    NextSlotToday,
    NoSchedule,
)
from models.timeslot import TimeSlot


# ─── Testdaten-Hilfsfunktionen ────────────────────────────────────────────────

# Woche vom 3. März 2025: Mo=3., Di=4., ..., Sa=8., So=9.
DAYS = {
    "Monday": 3, "Tuesday": 4, "Wednesday": 5, "Thursday": 6,
    "Friday": 7, "Saturday": 8, "Sunday": 9,
}


def at(day: str, hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2025, 3, DAYS[day], hour, minute, second)


@pytest.fixture
def weekly() -> WeeklySchedule:
    return default_schedule_config().to_weekly_schedule()


@pytest.fixture
def engine(weekly) -> FreeTimeEngine:
    return FreeTimeEngine(weekly)


# ─── WOCHENTAG ────────────────────────────────────────────────────────────────

class TestCalendarWeekday:
    def test_sunday_is_one(self):
        assert calendar_weekday(at("Sunday", 12, 0)) == 1

    def test_monday_is_two(self):
        assert calendar_weekday(at("Monday", 12, 0)) == 2

    def test_saturday_is_seven(self):
        assert calendar_weekday(at("Saturday", 12, 0)) == 7


# ─── IS_ACTIVE ────────────────────────────────────────────────────────────────

class TestIsActive:
    SLOT = TimeSlot(8, 0, 10, 30)

    def test_start_is_active(self):
        """Beginn zählt als aktiv."""
        assert is_active(self.SLOT, at("Monday", 8, 0))

    def test_end_is_not_active(self):
        """Ende ist offen: 10:30 nicht mehr aktiv."""
        assert not is_active(self.SLOT, at("Monday", 10, 30))

    def test_last_minute_before_end(self):
        assert is_active(self.SLOT, at("Monday", 10, 29))
        assert is_active(self.SLOT, at("Monday", 10, 29, 59))

    def test_before_start(self):
        assert not is_active(self.SLOT, at("Monday", 7, 59))

    @pytest.mark.parametrize("hour, minute", [(17, 10), (20, 0), (23, 58), (23, 59)])
    def test_open_ended_runs_until_midnight(self, hour, minute):
        """Slots mit Ende 23:59 sind bis einschließlich 23:59 aktiv."""
        assert is_active(TimeSlot(17, 10, 23, 59), at("Monday", hour, minute))

    def test_open_ended_not_active_before_start(self):
        assert not is_active(TimeSlot(17, 10, 23, 59), at("Monday", 17, 9))

    def test_whole_day_slot(self):
        slot = TimeSlot(0, 0, 23, 59)
        assert is_active(slot, at("Sunday", 0, 0))
        assert is_active(slot, at("Sunday", 23, 59))

    def test_23_58_end_is_exclusive(self):
        """Nur 23:59 ist Tagesende-Markierung; 23:58 ist ein normales Ende."""
        assert not is_active(TimeSlot(20, 0, 23, 58), at("Monday", 23, 58))


# ─── STATUS: MONTAG ───────────────────────────────────────────────────────────

class TestMondayStatus:
    def test_inside_first_slot(self, weekly):
        status = current_status(weekly, at("Monday", 9, 0))
        assert status == CurrentlyFree(TimeSlot(8, 0, 10, 30), "Monday")

    def test_between_slots(self, weekly):
        status = current_status(weekly, at("Monday", 11, 0))
        assert status == NextSlotToday(TimeSlot(12, 10, 13, 50), "Monday")

    def test_before_first_slot(self, weekly):
        status = current_status(weekly, at("Monday", 7, 30))
        assert status == NextSlotToday(TimeSlot(8, 0, 10, 30), "Monday")

    def test_at_slot_end_points_to_next(self, weekly):
        """10:30 ist nicht mehr aktiv → nächster Slot 12:10."""
        status = current_status(weekly, at("Monday", 10, 30))
        assert status == NextSlotToday(TimeSlot(12, 10, 13, 50), "Monday")

    def test_afternoon_gap(self, weekly):
        status = current_status(weekly, at("Monday", 16, 0))
        assert status == NextSlotToday(TimeSlot(17, 10, 23, 59), "Monday")

    def test_late_evening_is_day_over(self, weekly):
        assert current_status(weekly, at("Monday", 23, 30)) == DayOver()

    def test_evening_slot_start_is_day_over(self, weekly):
        assert current_status(weekly, at("Monday", 17, 10)) == DayOver()


# ─── STATUS: WOHNHEIM-GRENZE ──────────────────────────────────────────────────

class TestDayOverBoundary:
    """Samstag ist ganztägig frei → jeder Zeitpunkt liegt in einem aktiven Slot."""

    WHOLE_DAY = TimeSlot(0, 0, 23, 59)

    def test_17_09_is_free(self, weekly):
        assert current_status(weekly, at("Saturday", 17, 9)) == CurrentlyFree(
            self.WHOLE_DAY, "Saturday")

    def test_17_10_is_day_over(self, weekly):
        assert current_status(weekly, at("Saturday", 17, 10)) == DayOver()

    def test_17_00_is_free(self, weekly):
        """Stunde ≥ 17, aber Minute < 10 → kein DayOver."""
        assert isinstance(current_status(weekly, at("Saturday", 17, 0)), CurrentlyFree)

    def test_18_00_is_free(self, weekly):
        """Stunde und Minute werden einzeln verglichen: 18:00 ist kein DayOver."""
        assert isinstance(current_status(weekly, at("Saturday", 18, 0)), CurrentlyFree)

    def test_18_10_is_day_over(self, weekly):
        assert current_status(weekly, at("Saturday", 18, 10)) == DayOver()

    def test_morning_minute_over_ten_is_free(self, weekly):
        assert isinstance(current_status(weekly, at("Saturday", 10, 45)), CurrentlyFree)

    def test_sunday_last_minute_is_day_over(self, weekly):
        assert current_status(weekly, at("Sunday", 23, 59)) == DayOver()

    def test_wednesday_early_evening_slot_is_free(self, weekly):
        """Mittwoch 16:20-open: um 16:45 aktiv und vor 17 Uhr → frei."""
        status = current_status(weekly, at("Wednesday", 16, 45))
        assert status == CurrentlyFree(TimeSlot(16, 20, 23, 59), "Wednesday")


# ─── STATUS: FOLGETAGE ────────────────────────────────────────────────────────

class TestOtherDay:
    def test_tuesday_afternoon_points_to_wednesday(self, weekly):
        status = current_status(weekly, at("Tuesday", 14, 0))
        assert status == NextSlotOtherDay(TimeSlot(8, 0, 8, 50), "Wednesday", 1)

    def test_skips_missing_days(self):
        weekly = WeeklySchedule({
            2: DaySchedule("Monday", (TimeSlot(8, 0, 9, 0),)),
            6: DaySchedule("Friday", (TimeSlot(13, 0, 13, 50),)),
        })
        status = current_status(weekly, at("Monday", 10, 0))
        assert status == NextSlotOtherDay(TimeSlot(13, 0, 13, 50), "Friday", 4)

    def test_skips_empty_days(self):
        weekly = WeeklySchedule({
            2: DaySchedule("Monday", (TimeSlot(8, 0, 9, 0),)),
            3: DaySchedule("Tuesday", ()),
            4: DaySchedule("Wednesday", (TimeSlot(9, 0, 10, 0),)),
        })
        status = current_status(weekly, at("Monday", 10, 0))
        assert status == NextSlotOtherDay(TimeSlot(9, 0, 10, 0), "Wednesday", 2)

    def test_wraps_from_saturday_to_sunday(self):
        weekly = WeeklySchedule({
            7: DaySchedule("Saturday", (TimeSlot(8, 0, 9, 0),)),
            2: DaySchedule("Monday", (TimeSlot(8, 0, 9, 0),)),
        })
        status = current_status(weekly, at("Saturday", 12, 0))
        assert status == NextSlotOtherDay(TimeSlot(8, 0, 9, 0), "Monday", 2)

    def test_only_today_in_table_finds_itself_a_week_ahead(self):
        """Einziger Tag ist heute → nach 7 Schritten wieder heute, days_ahead = 7."""
        weekly = WeeklySchedule({2: DaySchedule("Monday", (TimeSlot(8, 0, 9, 0),))})
        status = current_status(weekly, at("Monday", 10, 0))
        assert status == NextSlotOtherDay(TimeSlot(8, 0, 9, 0), "Monday", 7)

    def test_returns_first_slot_of_that_day(self):
        """Donnerstag nach dem letzten Slot → erster (nicht letzter) Slot am Freitag."""
        weekly = WeeklySchedule({
            5: DaySchedule("Thursday", (TimeSlot(8, 0, 8, 50),)),
            6: DaySchedule("Friday", (TimeSlot(13, 0, 13, 50), TimeSlot(17, 10, 23, 59))),
        })
        status = current_status(weekly, at("Thursday", 9, 0))
        assert status == NextSlotOtherDay(TimeSlot(13, 0, 13, 50), "Friday", 1)


# ─── STATUS: KEIN PLAN ────────────────────────────────────────────────────────

class TestNoSchedule:
    def test_missing_today(self):
        """Kein Eintrag für den heutigen Wochentag → NoSchedule, auch wenn andere Tage existieren."""
        weekly = WeeklySchedule({3: DaySchedule("Tuesday", (TimeSlot(13, 0, 13, 50),))})
        assert current_status(weekly, at("Monday", 9, 0)) == NoSchedule()

    def test_empty_table(self):
        assert current_status(WeeklySchedule({}), at("Friday", 9, 0)) == NoSchedule()

    def test_only_empty_days(self):
        weekly = WeeklySchedule({2: DaySchedule("Monday", ()), 3: DaySchedule("Tuesday", ())})
        assert current_status(weekly, at("Monday", 9, 0)) == NoSchedule()

    def test_table_keyed_outside_one_to_seven(self):
        """Falsche Nummerierung (z.B. 0-basiert) trifft einzelne Tage nicht."""
        weekly = WeeklySchedule({0: DaySchedule("Sunday", (TimeSlot(0, 0, 23, 59),))})
        assert current_status(weekly, at("Sunday", 12, 0)) == NoSchedule()


# ─── ENGINE-OBJEKT ────────────────────────────────────────────────────────────

class TestFreeTimeEngine:
    def test_idempotent(self, engine):
        """Gleicher Zeitpunkt → gleiches Ergebnis, kein versteckter Zustand."""
        moment = at("Monday", 11, 0)
        assert engine.current_status(moment) == engine.current_status(moment)

    def test_matches_module_function(self, engine, weekly):
        moment = at("Thursday", 12, 0)
        assert engine.current_status(moment) == current_status(weekly, moment)

    def test_from_config(self):
        engine = FreeTimeEngine.from_config(default_schedule_config())
        assert len(engine.weekly) == 7
        assert engine.weekly.get(3).day_name == "Tuesday"

    def test_today_schedule(self, engine):
        today = engine.today_schedule(at("Friday", 8, 0))
        assert today.day_name == "Friday"
        assert len(today.slots) == 2

    def test_today_schedule_missing(self):
        engine = FreeTimeEngine(WeeklySchedule({}))
        assert engine.today_schedule(at("Friday", 8, 0)) is None
        assert engine.active_slot(at("Friday", 8, 0)) is None

    def test_active_slot_ignores_day_over(self, engine):
        """active_slot liefert den Slot auch nach der Wohnheim-Grenze."""
        moment = at("Monday", 20, 30)
        assert engine.current_status(moment) == DayOver()
        assert engine.active_slot(moment) == TimeSlot(17, 10, 23, 59)

    def test_active_slot_none_between_slots(self, engine):
        assert engine.active_slot(at("Monday", 11, 0)) is None

    def test_timezone_aware_uses_local_wall_clock(self, engine):
        """Aware-Zeitpunkte werden mit ihrer eigenen Wanduhrzeit ausgewertet."""
        moment = datetime(2025, 3, 3, 9, 0, tzinfo=ZoneInfo("Europe/Berlin"))
        assert isinstance(engine.current_status(moment), CurrentlyFree)


# ─── ZEITQUELLEN ──────────────────────────────────────────────────────────────

class TestClocks:
    def test_fixed_clock(self):
        moment = at("Monday", 9, 0)
        assert FixedClock(moment).now() == moment

    def test_system_clock_with_timezone(self):
        now = SystemClock(ZoneInfo("Asia/Kolkata")).now()
        assert now.tzinfo == ZoneInfo("Asia/Kolkata")

    def test_system_clock_local(self):
        assert SystemClock().now().tzinfo is not None


# ─── POLLING ──────────────────────────────────────────────────────────────────

class TestStatusPoller:
    def test_polls_max_times_and_sleeps_between(self, engine):
        sleeps: list[float] = []
        seen = []
        poller = StatusPoller(engine, FixedClock(at("Monday", 9, 0)),
                              interval_seconds=60, sleep=sleeps.append)
        count = poller.poll(seen.append, max_polls=3)
        assert count == 3
        assert sleeps == [60, 60]
        assert seen == [CurrentlyFree(TimeSlot(8, 0, 10, 30), "Monday")] * 3

    def test_picks_up_new_time(self, engine):
        """Jede Abfrage liest die Uhr neu."""
        clock = FixedClock(at("Monday", 9, 0))
        seen = []

        def advance(_seconds):
            clock.moment = at("Monday", 11, 0)

        StatusPoller(engine, clock, sleep=advance).poll(seen.append, max_polls=2)
        assert isinstance(seen[0], CurrentlyFree)
        assert isinstance(seen[1], NextSlotToday)

    def test_keyboard_interrupt_stops(self, engine):
        calls = []

        def on_status(status):
            calls.append(status)
            if len(calls) == 2:
                raise KeyboardInterrupt

        poller = StatusPoller(engine, FixedClock(at("Monday", 9, 0)), sleep=lambda s: None)
        assert poller.poll(on_status) == 1
        assert len(calls) == 2

    def test_invalid_interval(self, engine):
        with pytest.raises(ValueError):
            StatusPoller(engine, FixedClock(at("Monday", 9, 0)), interval_seconds=0)

    def test_poll_once(self, engine):
        poller = StatusPoller(engine, FixedClock(at("Tuesday", 14, 0)))
        assert poller.poll_once() == NextSlotOtherDay(TimeSlot(8, 0, 8, 50), "Wednesday", 1)

    def test_last_polled_at_matches_status_moment(self, engine):
        """Die Anzeige bekommt denselben Zeitpunkt wie die Statusberechnung."""
        clock = FixedClock(at("Monday", 9, 0))
        poller = StatusPoller(engine, clock)
        assert poller.last_polled_at is None
        seen = []

        def on_status(status):
            seen.append((status, poller.last_polled_at))
            clock.moment = at("Tuesday", 0, 0)

        poller.poll(on_status, max_polls=1)
        assert seen == [(CurrentlyFree(TimeSlot(8, 0, 10, 30), "Monday"), at("Monday", 9, 0))]
