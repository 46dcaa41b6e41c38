from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from granjafacil.domain.models.schedule_event import ClassifiedEvent
from granjafacil.domain.value_objects.event import EventKind, EventStatus
from granjafacil.utils.datetime_tz import format_br_date

HEADER = ("Data", "Tipo", "Título", "Descrição", "Status", "Lote")

KIND_LABELS = {
    EventKind.PHASE: "Fase",
    EventKind.VACCINE: "Vacina",
    EventKind.WEIGHING: "Pesagem",
}

STATUS_LABELS = {
    EventStatus.PENDING: "Pendente",
    EventStatus.LATE: "Atrasado",
    EventStatus.APPLIED: "Aplicada",
    EventStatus.DONE: "Concluído",
}


def render_calendar_csv(events: Iterable[ClassifiedEvent], batch_name: str) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for item in sorted(events, key=lambda e: (e.expected_date, e.id)):
        writer.writerow(
            (
                format_br_date(item.expected_date),
                KIND_LABELS[item.kind],
                item.event.title,
                item.event.description,
                STATUS_LABELS[item.status],
                batch_name,
            )
        )
    return buffer.getvalue()


def export_filename(batch_name: str, stamp: str) -> str:
    safe = "".join(c if c.isalnum() or c in "-_" else "-" for c in batch_name).strip("-")
    return f"calendario-{safe or 'lote'}-{stamp}.csv"
