from __future__ import annotations

import csv
import io
from collections.abc import Sequence

from granjafacil.domain.services.consumption import BatchConsumption
from granjafacil.utils.datetime_tz import format_br_date

PHASE_LABELS = {
    "recria": "Recria",
    "crescimento": "Crescimento",
    "producao": "Produção",
}


def _phase_label(name: str) -> str:
    return PHASE_LABELS.get(name, name.capitalize())


def render_consumption_csv(rows: Sequence[BatchConsumption], phase_names: Sequence[str]) -> str:
    """One line per batch with a configured breed; phases it lacks stay blank."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(
        (
            "Lote",
            "Raça",
            "Número de Aves",
            "Data Entrada",
            *(f"Consumo {_phase_label(name)} (kg)" for name in phase_names),
            "Consumo Total (kg)",
            "Consumo por Ave (kg)",
        )
    )
    for row in rows:
        if row.error:
            continue
        by_phase = {p.phase: p.feed_kg for p in row.phases}
        writer.writerow(
            (
                row.batch.name,
                row.breed_name,
                row.batch.bird_count,
                format_br_date(row.batch.entry_date),
                *(f"{by_phase[n]:.2f}" if n in by_phase else "" for n in phase_names),
                f"{row.total_kg:.2f}",
                str(row.kg_per_bird),
            )
        )
    return buffer.getvalue()


def export_filename(stamp: str) -> str:
    return f"relatorio-consumo-{stamp}.csv"
