from __future__ import annotations

from enum import Enum


class VaccineType(str, Enum):
    LIVE = "live"
    INACTIVATED = "inactivated"
    RECOMBINANT = "recombinant"


class ApplicationRoute(str, Enum):
    ORAL = "oral"
    OCULAR = "ocular"
    NASAL = "nasal"
    SUBCUTANEOUS = "subcutaneous"
    INTRAMUSCULAR = "intramuscular"
    SPRAY = "spray"
