"""Lunar calendar lookup for birth dates."""

from .converter import LunarBirthInfo, LunarCalendar

__all__ = ["LunarBirthInfo", "LunarCalendar"]
