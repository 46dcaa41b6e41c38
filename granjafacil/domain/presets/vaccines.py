"""Default vaccination programme for commercial layers."""

from __future__ import annotations

from granjafacil.domain.models.vaccine import VaccinePreset
from granjafacil.domain.value_objects.vaccine import ApplicationRoute as Route
from granjafacil.domain.value_objects.vaccine import VaccineType as Type

VACCINE_PRESETS: tuple[VaccinePreset, ...] = (
    VaccinePreset(
        "poulvac-e-coli", "POULVAC E-COLI", "Zoetis", Type.LIVE, Route.SUBCUTANEOUS, 1, 0.5,
        notes="Contra colibacilose",
    ),
    VaccinePreset(
        "poulvac-trt", "POULVAC TRT", "Zoetis", Type.LIVE, Route.OCULAR, 7, 0.03,
        notes="Contra rinotraqueíte",
    ),
    VaccinePreset(
        "newcastle-7d", "Newcastle (La Sota)", "MSD", Type.LIVE, Route.OCULAR, 7, 0.03,
        booster_interval_days=14,
        notes="Primeira vacinação contra Newcastle",
    ),
    VaccinePreset(
        "bronquite-7d", "Bronquite Infecciosa (H120)", "Zoetis", Type.LIVE, Route.OCULAR, 7, 0.03,
        booster_interval_days=14,
        notes="Proteção contra bronquite infecciosa",
    ),
    VaccinePreset(
        "gumboro-14d", "Gumboro (Cepa Intermediária)", "Boehringer", Type.LIVE, Route.ORAL, 14,
        0.5,
        booster_interval_days=7,
        notes="Segunda dose contra Gumboro",
    ),
    VaccinePreset(
        "newcastle-21d", "Newcastle (La Sota)", "MSD", Type.LIVE, Route.SPRAY, 21, 1.0,
        notes="Reforço Newcastle - aplicação por spray",
    ),
    VaccinePreset(
        "gumboro-28d", "Gumboro (Cepa Forte)", "Boehringer", Type.LIVE, Route.ORAL, 28, 0.5,
        notes="Terceira dose - cepa mais forte",
    ),
    VaccinePreset(
        "encefalomielite-35d", "Encefalomielite Aviária", "Zoetis", Type.LIVE, Route.ORAL, 35,
        0.5,
        notes="Proteção contra encefalomielite",
    ),
    VaccinePreset(
        "coriza-42d", "Coriza Infecciosa", "MSD", Type.INACTIVATED, Route.SUBCUTANEOUS, 42, 0.5,
        booster_interval_days=21,
        notes="Primeira dose de coriza - vacina inativada",
    ),
    VaccinePreset(
        "laringotraqueite-42d", "Laringotraqueíte Infecciosa", "Boehringer", Type.LIVE,
        Route.OCULAR, 42, 0.03,
        notes="Proteção contra laringotraqueíte",
    ),
    VaccinePreset(
        "coriza-63d", "Coriza Infecciosa (Reforço)", "MSD", Type.INACTIVATED, Route.SUBCUTANEOUS,
        63, 0.5,
        notes="Segunda dose de coriza infecciosa",
    ),
    VaccinePreset(
        "newcastle-70d", "Newcastle (Inativada)", "Zoetis", Type.INACTIVATED, Route.INTRAMUSCULAR,
        70, 0.5,
        notes="Vacina inativada para proteção duradoura",
    ),
    VaccinePreset(
        "bronquite-70d", "Bronquite Infecciosa (Inativada)", "MSD", Type.INACTIVATED,
        Route.INTRAMUSCULAR, 70, 0.5,
        notes="Vacina inativada para período de postura",
    ),
    VaccinePreset(
        "sindrome-112d", "Síndrome da Queda de Postura", "Boehringer", Type.INACTIVATED,
        Route.INTRAMUSCULAR, 112, 0.5,
        notes="Proteção contra síndrome da queda de postura",
    ),
    VaccinePreset(
        "salmonela-112d", "Salmonela Enteritidis", "Zoetis", Type.INACTIVATED,
        Route.INTRAMUSCULAR, 112, 0.5,
        notes="Prevenção de salmonela enteritidis",
    ),
)
