"""Birthdate-derived profile attributes.

Western tropical zodiac signs and Pythagorean numerology computed from a
``dd-mm-yyyy`` birthdate. The result only feeds prompt construction, so the
attributes are kept small and deterministic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

from futurepalz_mcp_server.errors import InvalidInputError

MASTER_NUMBERS = {11, 22, 33}

# (last month, last day, sign) for each sign, in calendar order from January.
_ZODIAC_BOUNDARIES: tuple[tuple[int, int, str], ...] = (
    (1, 19, "Capricorn"),
    (2, 18, "Aquarius"),
    (3, 20, "Pisces"),
    (4, 19, "Aries"),
    (5, 20, "Taurus"),
    (6, 20, "Gemini"),
    (7, 22, "Cancer"),
    (8, 22, "Leo"),
    (9, 22, "Virgo"),
    (10, 22, "Libra"),
    (11, 21, "Scorpio"),
    (12, 21, "Sagittarius"),
    (12, 31, "Capricorn"),
)

RULING_PLANETS = {
    "Aries": "Mars",
    "Taurus": "Venus",
    "Gemini": "Mercury",
    "Cancer": "Moon",
    "Leo": "Sun",
    "Virgo": "Mercury",
    "Libra": "Venus",
    "Scorpio": "Pluto",
    "Sagittarius": "Jupiter",
    "Capricorn": "Saturn",
    "Aquarius": "Uranus",
    "Pisces": "Neptune",
}

ELEMENTS = {
    "Aries": "Fire",
    "Leo": "Fire",
    "Sagittarius": "Fire",
    "Taurus": "Earth",
    "Virgo": "Earth",
    "Capricorn": "Earth",
    "Gemini": "Air",
    "Libra": "Air",
    "Aquarius": "Air",
    "Cancer": "Water",
    "Scorpio": "Water",
    "Pisces": "Water",
}

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_SEPARATORS = re.compile(r"[/.]")


@dataclass(frozen=True)
class ProfileAttributes:
    """Attributes derived from a birthdate."""

    birthdate: date
    zodiac_sign: str
    ruling_planet: str
    element: str
    life_path_number: int
    day_of_week: str


def parse_birthdate(dob: str) -> date:
    """Parse a ``dd-mm-yyyy`` birthdate; ``/`` and ``.`` also work as separators.

    Raises:
        InvalidInputError: If the value is not a valid calendar date.

    """
    if not isinstance(dob, str):
        raise InvalidInputError(f"Invalid birthdate {dob!r}. Expected dd-mm-yyyy")
    normalized = _SEPARATORS.sub("-", dob.strip())
    try:
        return datetime.strptime(normalized, "%d-%m-%Y").date()
    except ValueError as exc:
        raise InvalidInputError(
            f"Invalid birthdate '{dob}'. Expected dd-mm-yyyy"
        ) from exc


def zodiac_sign(day: int, month: int) -> str:
    """Return the tropical zodiac sign for a day and month."""
    for last_month, last_day, sign in _ZODIAC_BOUNDARIES:
        if (month, day) <= (last_month, last_day):
            return sign
    raise InvalidInputError(f"Invalid day/month: {day}/{month}")


def reduce_number(num: int, keep_master: bool = True) -> int:
    """Reduce a number to a single digit, optionally keeping master numbers."""
    while num > 9:
        if keep_master and num in MASTER_NUMBERS:
            return num
        num = sum(int(digit) for digit in str(num))
    return num


def life_path_number(birthdate: date) -> int:
    """Compute the life path number from a birthdate.

    Day, month and year are reduced separately, then summed and reduced again.
    """
    day = reduce_number(birthdate.day)
    month = reduce_number(birthdate.month)
    year = reduce_number(sum(int(digit) for digit in str(birthdate.year)))
    return reduce_number(day + month + year)


def compute_profile(dob: str) -> ProfileAttributes:
    """Compute profile attributes from a ``dd-mm-yyyy`` birthdate.

    Raises:
        InvalidInputError: If ``dob`` is not a valid birthdate.

    """
    birthdate = parse_birthdate(dob)
    sign = zodiac_sign(birthdate.day, birthdate.month)
    return ProfileAttributes(
        birthdate=birthdate,
        zodiac_sign=sign,
        ruling_planet=RULING_PLANETS[sign],
        element=ELEMENTS[sign],
        life_path_number=life_path_number(birthdate),
        day_of_week=WEEKDAYS[birthdate.weekday()],
    )
