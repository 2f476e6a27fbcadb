from models.timeslot import TimeSlot
from models.day_schedule import DaySchedule, WeeklySchedule
from models.status import (
    FreeTimeStatus,
    NoSchedule,
    DayOver,
    CurrentlyFree,
    NextSlotToday,
    NextSlotOtherDay,
)

__all__ = [
    "TimeSlot",
    "DaySchedule",
    "WeeklySchedule",
    "FreeTimeStatus",
    "NoSchedule",
    "DayOver",
    "CurrentlyFree",
    "NextSlotToday",
    "NextSlotOtherDay",
]
