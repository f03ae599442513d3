"""
calendar_converter.py — Map (calendar, year) to an approximate Gregorian year.

Approximations suitable for a centuries-scale historical timeline:
  - Shamsi → Gregorian: fixed offset of 621 years. Ignores that Nowruz
    falls in March, so dates near the year boundary may be off by one.
  - Qamari → Gregorian: floor(year * 0.97 + 622). The 0.97 factor models
    the lunar year being ~3% shorter; linear, not single-year precise.
  - Gregorian: identity.

Each calendar is one converter class. The scanner only talks to
``to_gregorian`` / ``get_converter``, so an exact converter can be
registered in place of an approximate one.
"""

import math
from typing import Dict

from garden_timeline.temporal.calendar_system import CalendarSystem


class CalendarConverter:
    """Converts a year of one calendar system to a Gregorian year."""

    system: CalendarSystem = CalendarSystem.GREGORIAN

    def to_gregorian(self, year: int) -> int:
        raise NotImplementedError


class GregorianConverter(CalendarConverter):
    system = CalendarSystem.GREGORIAN

    def to_gregorian(self, year: int) -> int:
        return int(year)


class ShamsiConverter(CalendarConverter):
    """Hijri Shamsi (Jalali) → Gregorian, fixed offset."""

    system = CalendarSystem.SHAMSI
    OFFSET = 621

    def to_gregorian(self, year: int) -> int:
        return int(year) + self.OFFSET


class QamariConverter(CalendarConverter):
    """Hijri Qamari (lunar) → Gregorian, linear drift approximation."""

    system = CalendarSystem.QAMARI
    EPOCH = 622
    LUNAR_RATIO = 0.97

    def to_gregorian(self, year: int) -> int:
        return math.floor(int(year) * self.LUNAR_RATIO + self.EPOCH)


_CONVERTERS: Dict[CalendarSystem, CalendarConverter] = {
    CalendarSystem.GREGORIAN: GregorianConverter(),
    CalendarSystem.SHAMSI: ShamsiConverter(),
    CalendarSystem.QAMARI: QamariConverter(),
}


def get_converter(system: CalendarSystem) -> CalendarConverter:
    return _CONVERTERS[CalendarSystem(system)]


def register_converter(converter: CalendarConverter) -> CalendarConverter:
    """
    Install a converter for its calendar system.

    Returns the converter previously registered for that system so callers
    (tests included) can restore it.
    """
    previous = _CONVERTERS[converter.system]
    _CONVERTERS[converter.system] = converter
    return previous


def to_gregorian(system: CalendarSystem, year: int) -> int:
    """Convert ``year`` expressed in ``system`` to an approximate Gregorian year."""
    return get_converter(system).to_gregorian(year)


def shamsi_to_gregorian(year: int) -> int:
    return to_gregorian(CalendarSystem.SHAMSI, year)


def qamari_to_gregorian(year: int) -> int:
    return to_gregorian(CalendarSystem.QAMARI, year)
