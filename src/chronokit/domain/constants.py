from __future__ import annotations

from typing import Dict, List, Tuple

DAYS: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTHS: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY

# Units whose length is a fixed number of milliseconds.
FIXED_UNIT_MS: Dict[str, int] = {
    "millisecond": 1,
    "second": MS_PER_SECOND,
    "minute": MS_PER_MINUTE,
    "hour": MS_PER_HOUR,
    "day": MS_PER_DAY,
    "week": MS_PER_WEEK,
}

TIME_UNITS: Tuple[str, ...] = (
    "year",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)

DEFAULT_FORMAT = "dd, mmm DD, YYYY HH:mm:ss"

YEAR_FORMATS = ("YYYY", "YY", "yyyy", "yy")
MONTH_FORMATS = ("M", "MM", "MMM", "MMMM", "mmm", "mmmm")
DATE_FORMATS = ("DD", "D", "Do")
DAY_FORMATS = ("d", "dd", "ddd")
HOUR_FORMATS = ("H", "HH", "hh", "h")
MINUTE_FORMATS = ("mm", "m")
SECOND_FORMATS = ("ss", "s")
MILLISECOND_FORMATS = ("ms", "mss")
TIME_FORMATS = ("a", "A")
ZONE_FORMATS = ("Z", "ZZ")

# Longest first, so that a short token never wins against a longer one sharing its prefix.
SORTED_TIME_FORMATS: Tuple[str, ...] = tuple(
    sorted(
        YEAR_FORMATS
        + MONTH_FORMATS
        + DATE_FORMATS
        + DAY_FORMATS
        + HOUR_FORMATS
        + MINUTE_FORMATS
        + SECOND_FORMATS
        + MILLISECOND_FORMATS
        + TIME_FORMATS
        + ZONE_FORMATS,
        key=len,
        reverse=True,
    )
)

ZodiacTable = List[Tuple[str, Tuple[int, int]]]

WESTERN_ZODIAC: ZodiacTable = [
    ("Aries", (3, 21)),
    ("Taurus", (4, 20)),
    ("Gemini", (5, 21)),
    ("Cancer", (6, 21)),
    ("Leo", (7, 23)),
    ("Virgo", (8, 23)),
    ("Libra", (9, 23)),
    ("Scorpio", (10, 23)),
    ("Sagittarius", (11, 22)),
    ("Capricorn", (12, 22)),
    ("Aquarius", (1, 20)),
    ("Pisces", (2, 19)),
]

VEDIC_ZODIAC: ZodiacTable = [
    ("Aries", (4, 14)),
    ("Taurus", (5, 15)),
    ("Gemini", (6, 15)),
    ("Cancer", (7, 16)),
    ("Leo", (8, 17)),
    ("Virgo", (9, 17)),
    ("Libra", (10, 17)),
    ("Scorpio", (11, 16)),
    ("Sagittarius", (12, 16)),
    ("Capricorn", (1, 14)),
    ("Aquarius", (2, 13)),
    ("Pisces", (3, 15)),
]

ZODIAC_PRESETS: Dict[str, ZodiacTable] = {
    "western": WESTERN_ZODIAC,
    "tropical": WESTERN_ZODIAC,
    "vedic": VEDIC_ZODIAC,
}

# Hour ranges are inclusive; a range whose start is after its end wraps past midnight.
DEFAULT_DAY_PARTS: Dict[str, Tuple[int, int]] = {
    "night": (21, 23),
    "midnight": (0, 1),
    "late_night": (2, 4),
    "morning": (5, 11),
    "afternoon": (12, 16),
    "evening": (17, 20),
}

BN_YEAR_OFFSET = 593

BN_DIGITS: Tuple[str, ...] = ("০", "১", "২", "৩", "৪", "৫", "৬", "৭", "৮", "৯")

# (bangla, latin, short)
BN_MONTHS: Tuple[Tuple[str, str, str], ...] = (
    ("বৈশাখ", "Boishakh", "বৈ"),
    ("জ্যৈষ্ঠ", "Joishtho", "জ্য"),
    ("আষাঢ়", "Asharh", "আষা"),
    ("শ্রাবণ", "Srabon", "শ্রা"),
    ("ভাদ্র", "Bhadro", "ভা"),
    ("আশ্বিন", "Ashwin", "আশ্বি"),
    ("কার্তিক", "Kartik", "কা"),
    ("অগ্রহায়ণ", "Ogrohayon", "অগ্র"),
    ("পৌষ", "Poush", "পৌ"),
    ("মাঘ", "Magh", "মা"),
    ("ফাল্গুন", "Falgun", "ফা"),
    ("চৈত্র", "Choitro", "চৈ"),
)

BN_DAYS: Tuple[Tuple[str, str, str], ...] = (
    ("রবিবার", "Robibar (Sunday)", "র"),
    ("সোমবার", "Sombar (Monday)", "সো"),
    ("মঙ্গলবার", "Mongolbar (Tuesday)", "ম"),
    ("বুধবার", "Budhbar (Wednesday)", "বু"),
    ("বৃহস্পতিবার", "Brihoshpotibar (Thursday)", "বৃ"),
    ("শুক্রবার", "Shukrobar (Friday)", "শু"),
    ("শনিবার", "Shonibar (Saturday)", "শ"),
)

# One season spans two Bangla months.
BN_SEASONS: Tuple[Tuple[str, str], ...] = (
    ("গ্রীষ্ম", "Grisma (Summer)"),
    ("বর্ষা", "Borsha (Monsoon)"),
    ("শরৎ", "Shorot (Autumn)"),
    ("হেমন্ত", "Hemonto (Late Autumn)"),
    ("শীত", "Sheet (Winter)"),
    ("বসন্ত", "Boshonto (Spring)"),
)

BN_CALENDAR_VARIANTS = ("revised-2019", "revised-1966")

# Each variant: the Gregorian (month, day) on which the year starts and its month lengths.
BN_MONTH_TABLES: Dict[str, Dict[str, object]] = {
    "revised-2019": {
        "epoch": (4, 14),
        "normal": (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 29, 30),
        "leap": (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30),
    },
    "revised-1966": {
        "epoch": (4, 14),
        "normal": (31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30, 30),
        "leap": (31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 31, 30),
    },
}
