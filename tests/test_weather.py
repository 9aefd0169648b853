import pytest

from algolab.weather import (
    FST_YEAR,
    YEARS,
    Month,
    Weather,
    WeatherFormatError,
    format_table,
    historical_min_temp,
    main,
    max_temp_year,
    month_max_rainfall,
    parse_table,
    parse_weather,
    read_table,
)


def _record(year, month, day, weather):
    return f"{year} {month} {day} {weather.format()}"


def _text(*records):
    return "\n".join(_record(*r) for r in records) + "\n"


def test_weather_format_round_trip():
    weather = Weather(12, 20, -4, 1013, 70, 3)
    assert parse_weather(weather.format()) == weather


def test_weather_format_layout():
    assert Weather(1, 2, 3, 4, 5, 6).format() == "1 2 3 4 5 6"


def test_parse_weather_rejects_negative_unsigned():
    with pytest.raises(WeatherFormatError):
        parse_weather("1 2 3 -4 5 6")


def test_parse_weather_rejects_short_input():
    with pytest.raises(WeatherFormatError):
        parse_weather("1 2 3 4 5")


def test_parse_table_places_reading():
    weather = Weather(10, 15, 5, 1000, 50, 2)
    table = parse_table(_text((FST_YEAR + 1, 3, 7, weather)))
    assert table[1][Month.MARCH][6] == weather
    assert table[0][Month.JANUARY][0] is None


def test_parse_table_empty_raises():
    with pytest.raises(WeatherFormatError):
        parse_table("   \n")


def test_parse_table_bad_header_raises():
    with pytest.raises(WeatherFormatError):
        parse_table("1980 x 1 1 2 3 4 5 6")


def test_parse_table_truncated_weather_raises():
    with pytest.raises(WeatherFormatError):
        parse_table("1980 1 1 1 2 3")


def test_parse_table_out_of_range_date_raises():
    with pytest.raises(WeatherFormatError):
        parse_table(_text((FST_YEAR - 1, 1, 1, Weather(1, 2, 3, 4, 5, 6))))
    with pytest.raises(WeatherFormatError):
        parse_table(_text((FST_YEAR, 1, 29, Weather(1, 2, 3, 4, 5, 6))))


def test_format_table_round_trip():
    text = _text(
        (FST_YEAR, 1, 1, Weather(1, 2, 0, 4, 5, 6)),
        (FST_YEAR, 2, 28, Weather(-1, 3, -2, 9, 8, 7)),
        (FST_YEAR + 5, 12, 3, Weather(0, 0, 0, 0, 0, 0)),
    )
    table = parse_table(text)
    dumped = format_table(table)
    assert dumped == text.rstrip("\n")
    assert parse_table(dumped) == table


def test_historical_min_temp():
    table = parse_table(
        _text(
            (FST_YEAR, 1, 1, Weather(10, 20, 5, 1, 1, 1)),
            (FST_YEAR + 3, 6, 10, Weather(0, 8, -3, 1, 1, 1)),
        )
    )
    assert historical_min_temp(table) == -3


def test_max_temp_year():
    table = parse_table(
        _text(
            (FST_YEAR, 1, 1, Weather(10, 30, 5, 1, 1, 1)),
            (FST_YEAR, 7, 4, Weather(10, 35, 5, 1, 1, 1)),
            (FST_YEAR + 1, 2, 2, Weather(10, 20, 5, 1, 1, 1)),
        )
    )
    result = max_temp_year(table)
    assert len(result) == YEARS
    assert result[0] == 35
    assert result[1] == 20
    assert result[2] is None


def test_month_max_rainfall_follows_running_total():
    table = parse_table(
        _text(
            (FST_YEAR, 1, 1, Weather(0, 0, 0, 0, 0, 10)),
            (FST_YEAR, 2, 1, Weather(0, 0, 0, 0, 0, 5)),
            (FST_YEAR, 3, 1, Weather(0, 0, 0, 0, 0, 0)),
        )
    )
    result = month_max_rainfall(table)
    assert result[0] == Month.FEBRUARY
    assert result[1] == Month.JANUARY


def test_read_table(tmp_path):
    weather = Weather(3, 4, 1, 2, 2, 2)
    path = tmp_path / "weather.in"
    path.write_text(_text((FST_YEAR, 5, 5, weather)))
    assert read_table(path)[0][Month.MAY][4] == weather


def test_main_prints_statistics(tmp_path, capsys):
    path = tmp_path / "weather.in"
    path.write_text(_text((FST_YEAR, 1, 1, Weather(1, 9, -7, 1, 1, 4))))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "La temperatura historica minima de Cordoba es: -7" in out
    assert out.endswith(f"{FST_YEAR} 1 1 1 9 -7 1 1 4")


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.in")]) == 1
    assert "File does not exist." in capsys.readouterr().err