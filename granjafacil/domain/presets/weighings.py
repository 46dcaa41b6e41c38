from __future__ import annotations

# Weekly through the end of crescimento, then every four weeks while laying.
WEIGHING_WEEKS: tuple[int, ...] = tuple(range(1, 23)) + tuple(range(26, 75, 4))

# Ideal body weight (g) per week of age, NOVOgen Tinted.
NOVOGEN_TINTED_CURVE: dict[int, int] = {
    1: 70,
    2: 120,
    3: 200,
    4: 300,
    5: 420,
    6: 550,
    7: 680,
    8: 810,
    9: 940,
    10: 1060,
    11: 1170,
    12: 1270,
    13: 1360,
    14: 1440,
    15: 1510,
    16: 1570,
    17: 1620,
    18: 1660,
    19: 1700,
    20: 1730,
    21: 1750,
    22: 1780,
    26: 1850,
    30: 1900,
    34: 1950,
    38: 2000,
    42: 2020,
    46: 2030,
    50: 2040,
    54: 2050,
    58: 2060,
    62: 2070,
    66: 2070,
    70: 2070,
    74: 2070,
}
