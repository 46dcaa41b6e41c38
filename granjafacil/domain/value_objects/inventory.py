from __future__ import annotations

from enum import Enum


class FeedInputCategory(str, Enum):
    FEED = "feed"
    MEDICINE = "medicine"
    SUPPLEMENT = "supplement"
    MATERIAL = "material"
    OTHER = "other"


class StockUnit(str, Enum):
    KG = "kg"
    G = "g"
    L = "l"
    ML = "ml"
    UNIT = "unit"


class MovementType(str, Enum):
    IN = "in"
    OUT = "out"


class FormulaType(str, Enum):
    INITIAL = "initial"
    GROWTH = "growth"
    LAYING = "laying"
    FINISHING = "finishing"
