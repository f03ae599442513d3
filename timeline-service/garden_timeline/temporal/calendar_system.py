"""
calendar_system.py — Calendar systems a year token can be written in.
"""

from enum import Enum


class CalendarSystem(str, Enum):
    """Calendar a numeric year token was expressed in."""

    GREGORIAN = "gregorian"   # میلادی
    SHAMSI = "shamsi"         # هجری شمسی (Jalali, solar)
    QAMARI = "qamari"         # هجری قمری (Islamic, lunar)
