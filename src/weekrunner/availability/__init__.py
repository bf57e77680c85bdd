"""
Availability calendar.

Components:
- intervals.py: index <-> time-of-day conversion for a fixed-width grid
- day_schedule.py: TimeStatus, TimeBlock, DaySchedule (one day's grid)
- week_schedule.py: Weekday, WeekSchedule (seven independent days)
"""
