"""Date manipulation utilities"""

from datetime import date


def calendar_year_difference(start: date, end: date) -> int:
    """Difference in calendar years only, month and day ignored"""
    return end.year - start.year
