"""
Gregorian to lunar calendar lookup.

Wraps lunar_python so the rest of the application only sees the lunar
month and day labels and the zodiac sign of the lunar year.
"""

from dataclasses import dataclass
from datetime import date

import structlog
from lunar_python import Solar

from ..errors import CalendarLookupError
from ..zodiac.cycle import ZodiacSign

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LunarBirthInfo:
    """Lunar calendar view of a Gregorian birth date."""
    solar_date: date
    lunar_month_label: str     # e.g. 五
    lunar_day_label: str       # e.g. 廿三
    sign: ZodiacSign           # Sign of the lunar year
    year_ganzhi: str = ""      # e.g. 庚午


class LunarCalendar:
    """Lunar lookup backed by lunar_python."""

    def lookup(self, solar_date: date) -> LunarBirthInfo:
        """
        Convert a validated Gregorian date.

        The zodiac sign follows the lunar year, so dates before the Spring
        Festival carry the previous year's sign.

        Raises:
            CalendarLookupError: If conversion fails or the sign label is unknown
        """
        try:
            lunar = Solar.fromYmd(solar_date.year, solar_date.month, solar_date.day).getLunar()
            label = lunar.getYearShengXiao()
            month_label = lunar.getMonthInChinese()
            day_label = lunar.getDayInChinese()
            year_ganzhi = lunar.getYearInGanZhi()
        except Exception as e:
            raise CalendarLookupError(
                f"Lunar conversion failed: {e}",
                solar_date=solar_date.isoformat()
            ) from e

        try:
            sign = ZodiacSign.from_label(label)
        except KeyError:
            raise CalendarLookupError(
                f"Unknown zodiac label: {label!r}",
                solar_date=solar_date.isoformat(),
                label=label
            ) from None

        logger.debug(
            "Lunar lookup",
            solar_date=solar_date.isoformat(),
            lunar_month=month_label,
            lunar_day=day_label,
            sign=sign.english
        )

        return LunarBirthInfo(
            solar_date=solar_date,
            lunar_month_label=month_label,
            lunar_day_label=day_label,
            sign=sign,
            year_ganzhi=year_ganzhi,
        )
