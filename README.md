# algolab

A collection of small algorithm exercises, usable both as a library and from
the command line. The commands talk to the user in Spanish.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `algolab-bounds` | Reads four integers and then a value from standard input, and reports whether the value is a maximum, minimum, upper bound or lower bound of them (and where it is, when present). |
| `algolab-tictactoe` | Plays tic-tac-toe for two players, reading cell numbers 0 to 8 from standard input. |
| `algolab-array FILE` | Loads an array of integers from `FILE`, prints it as `[a, b, c]` and says whether it is sorted. With `-` as `FILE` it asks for the length and the elements on standard input. |
| `algolab-fixstring` | Shows string length, equality and ordering on a few sample words. |
| `algolab-sort FILE` | Sorts copies of an integer array with selection, insertion and quick sort and prints, for each, the processor time in milliseconds, the comparisons and the swaps. |
| `algolab-phrase FILE` | Rebuilds a phrase from entries of the form `index -> *c*` and prints it in quotes. |
| `algolab-weather FILE` | Loads a weather table and prints the historical minimum temperature, each year's maximum temperature, each year's month of most rain (numbered 0 to 11), and then the whole table. |
| `algolab-players FILE` | Loads a ranking of tennis players, sorts it by rank with quicksort and prints it with the processor time the sort took. |

Every command returns exit status 1 on missing arguments (after printing
usage help), on a file that cannot be opened, or on malformed input.

### Array file format

    <amount of elements>
    <elem 1> <elem 2> ... <elem N>

Any whitespace separates the numbers. The length may be at most 100000.

### Phrase file format

One entry per line, at most 1000 entries, every index below 1000:

    <index> -> *<letter>*

The indexes must cover 0 up to the number of entries minus one; when an index
appears twice, its first letter is used.

### Weather file format

One line per day:

    <year> <month> <day> <avg temp> <max temp> <min temp> <pressure> <moisture> <rainfall>

Years run from 1980 to 2016, months from 1 to 12 and days from 1 to 28; a
date outside that range is an error. Days missing from the file stay empty
and are left out of the statistics; a year with no data shows `-` as its
maximum.

### Player file format

One player per line:

    <name> <country> <rank> <age> <points> <tournaments>

Names may be up to 100 characters, countries up to 3; the four numbers must
be non-negative integers.

## Library use

    from algolab.arrays import parse_array, is_sorted
    from algolab.sorting import quick_sort, SortStats

    values = parse_array("5\n3 1 4 1 5\n", 100)
    stats = SortStats()
    quick_sort(values, stats=stats)
    assert is_sorted(values)
    print(stats.comparisons, stats.swaps)

The sorting functions (`selection_sort`, `insertion_sort`, `quick_sort`,
`partition`) sort in place and take an optional `before(x, y)` order, which
defaults to `goes_before` (ascending), and an optional `SortStats` that
counts comparisons and swaps.

Other modules:

- `algolab.bounds`: `check_bound(value, values)` returns a `BoundData`.
- `algolab.tictactoe`: `new_board`, `place` (raises `InvalidCellError` or
  `CellOccupiedError`), `get_winner`, `has_free_cell`, `format_board`.
- `algolab.arrays`: `parse_array`, `read_array` (raise `ArrayFormatError`),
  `format_list`, `format_array`, `is_sorted`, `value_count`,
  `is_permutation_of`.
- `algolab.fixstring`: `fstring_length`, `fstring_eq`, `fstring_less_eq`,
  `fstring_set`.
- `algolab.phrase`: `parse_entries`, `read_entries`, `assemble` (raise
  `PhraseFormatError`).
- `algolab.weather`: `Weather`, `Month`, `parse_weather`, `parse_table`,
  `read_table`, `format_table`, `historical_min_temp`, `max_temp_year`,
  `month_max_rainfall` (parsing raises `WeatherFormatError`).
- `algolab.players`: `Player`, `parse_players`, `read_players`,
  `format_players`, `goes_before`, `sort_players`, `is_sorted`,
  `is_permutation_of` (parsing raises `PlayerFormatError`).

## What it does not do

The tic-tac-toe game has no computer opponent and no graphical board; it is
played by two people typing cell numbers. The commands only read and print;
none of them writes results back to a file.