"""Daily weather readings for a fixed span of years, and statistics over them."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence

FST_YEAR = 1980
LST_YEAR = 2016
YEARS = LST_YEAR - FST_YEAR + 1
MONTHS = 12
DAYS = 28

_FIELDS_PER_WEATHER = 6

_HELP = (
    "Usage: {program} <input file path>\n\n"
    "Load climate data from a given file in disk.\n"
    "\n"
    "The input file must exist in disk and every line in it must have the following format:\n\n"
    "<year> <month> <day> <temperature> <high> <low> <pressure> <moisture> <precipitations>\n\n"
    "Those elements must be integers and will be copied into the multidimensional integer array 'a'.\n"
    "The dimensions of the array are given by the macro tclimate.\n"
    "\n\n"
)


class Month(IntEnum):
    """Months of the year, numbered from zero."""

    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11


class WeatherFormatError(ValueError):
    """The text does not describe weather readings."""


@dataclass(frozen=True)
class Weather:
    """One day's measurements."""

    average_temp: int
    max_temp: int
    min_temp: int
    pressure: int
    moisture: int
    rainfall: int

    def format(self) -> str:
        """Render the six measurements separated by spaces."""
        return (
            f"{self.average_temp} {self.max_temp} {self.min_temp} "
            f"{self.pressure} {self.moisture} {self.rainfall}"
        )


WeatherTable = list[list[list["Weather | None"]]]


def _empty_table() -> WeatherTable:
    return [[[None] * DAYS for _ in range(MONTHS)] for _ in range(YEARS)]


def _unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(token)
    return value


def _weather_from_tokens(tokens: Sequence[str]) -> Weather:
    if len(tokens) != _FIELDS_PER_WEATHER:
        raise WeatherFormatError("Invalid format.")
    try:
        temps = [int(token) for token in tokens[:3]]
        rest = [_unsigned(token) for token in tokens[3:]]
    except ValueError as exc:
        raise WeatherFormatError("Invalid format.") from exc
    return Weather(*temps, *rest)


def parse_weather(text: str) -> Weather:
    """Parse ``<avg> <max> <min> <pressure> <moisture> <rainfall>``."""
    return _weather_from_tokens(text.split())


def parse_table(text: str) -> WeatherTable:
    """Parse lines of ``<year> <month> <day>`` followed by six measurements.

    Days that are not in the text stay ``None`` in the table.
    """
    tokens = text.split()
    if not tokens:
        raise WeatherFormatError("Invalid array.")
    table = _empty_table()
    position = 0
    while position < len(tokens):
        header = tokens[position : position + 3]
        if len(header) != 3:
            raise WeatherFormatError("Invalid array.")
        try:
            year, month, day = (_unsigned(token) for token in header)
        except ValueError as exc:
            raise WeatherFormatError("Invalid array.") from exc
        if not (FST_YEAR <= year <= LST_YEAR and 1 <= month <= MONTHS and 1 <= day <= DAYS):
            raise WeatherFormatError(f"Date out of range: {year} {month} {day}")
        weather = _weather_from_tokens(tokens[position + 3 : position + 9])
        table[year - FST_YEAR][month - 1][day - 1] = weather
        position += 3 + _FIELDS_PER_WEATHER
    return table


def read_table(path: str | os.PathLike[str]) -> WeatherTable:
    """Read a weather file; see :func:`parse_table` for the format."""
    with open(path, encoding="utf-8") as handle:
        return parse_table(handle.read())


def _readings(table: WeatherTable) -> Iterator[tuple[int, Month, int, Weather]]:
    for year, months in enumerate(table):
        for month, days in zip(Month, months):
            for day, weather in enumerate(days):
                if weather is not None:
                    yield year, month, day, weather


def format_table(table: WeatherTable) -> str:
    """Render every present reading as one line, with no trailing newline."""
    return "\n".join(
        f"{year + FST_YEAR} {month + 1} {day + 1} {weather.format()}"
        for year, month, day, weather in _readings(table)
    )


def historical_min_temp(table: WeatherTable) -> int:
    """Return the lowest minimum temperature in the table."""
    temps = [weather.min_temp for _, _, _, weather in _readings(table)]
    if not temps:
        raise ValueError("the table holds no readings")
    return min(temps)


def max_temp_year(table: WeatherTable) -> list[int | None]:
    """Return each year's highest maximum temperature, ``None`` for years without data."""
    result: list[int | None] = []
    for months in table:
        temps = [weather.max_temp for days in months for weather in days if weather is not None]
        result.append(max(temps) if temps else None)
    return result


def month_max_rainfall(table: WeatherTable) -> list[Month]:
    """Return, per year, the month where the running yearly rainfall total last grew.

    The total is accumulated over the whole year, day by day; a year with
    no rainfall gives January.
    """
    result = []
    for months in table:
        best = Month.JANUARY
        max_rain = 0
        total = 0
        for month, days in zip(Month, months):
            for weather in days:
                if weather is None:
                    continue
                total += weather.rainfall
                if total > max_rain:
                    max_rain = total
                    best = month
        result.append(best)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Load a weather file, print its statistics and then the whole table."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "weather"
        print(_HELP.format(program=program), end="")
        return 1
    try:
        table = read_table(args[0])
        min_temp = historical_min_temp(table)
    except OSError:
        print("File does not exist.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"La temperatura historica minima de Cordoba es: {min_temp}")
    maxima = " ".join("-" if value is None else str(value) for value in max_temp_year(table))
    print(f"\n[ {maxima} ]\n")
    months = " ".join(str(int(month)) for month in month_max_rainfall(table))
    print(f"\n[ {months} ]\n")
    sys.stdout.write(format_table(table))
    return 0