"""Game constants: tile values, bonus rules and the standard board layout."""

from __future__ import annotations

# Stands in for any letter; placed wildcards are stored uppercase.
WILDCARD_LETTER = "*"

BINGO_TILE_COUNT = 7
BINGO_BONUS = 50  # 50 points for using all 7 tiles in one turn

# Official Scrabble letter values, in the same "letters value" format
# accepted by parse_letter_values().
LETTER_VALUES_SPEC = """\
aeilnorstu 1
dg 2
bcmp 3
fhvwy 4
k 5
jx 8
qz 10
"""


def parse_letter_values(spec: str) -> dict[str, int]:
    """Parse a letter value table, one ``letters value`` pair per line."""
    values: dict[str, int] = {}
    for lineno, line in enumerate(spec.strip().splitlines(), start=1):
        parts = line.split()
        if len(parts) != 2 or not parts[0].isalpha() or not parts[1].isdigit():
            raise ValueError(f"Line {lineno} is not in 'letters value' format: {line!r}")
        letters, value = parts
        for letter in letters.lower():
            values[letter] = int(value)
    return values


LETTER_VALUES: dict[str, int] = parse_letter_values(LETTER_VALUES_SPEC)

# Bonus square layout, one string per row.
# Key: . = normal, d = double letter, t = triple letter,
#      D = double word, T = triple word, * = center (double word)
# fmt: off
STANDARD_MODIFIER_LAYOUT: list[str] = [
    "T..d...T...d..T",
    ".D...t...t...D.",
    "..D...d.d...D..",
    "d..D...d...D..d",
    "....D.....D....",
    ".t...t...t...t.",
    "..d...d.d...d..",
    "T..d...*...d..T",
    "..d...d.d...d..",
    ".t...t...t...t.",
    "....D.....D....",
    "d..D...d...D..d",
    "..D...d.d...D..",
    ".D...t...t...D.",
    "T..d...T...d..T",
]
# fmt: on
