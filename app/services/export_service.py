# app/services/export_service.py
"""
CSV export of allocation records: one row per person, header Name,Role,Group.
"""
import csv
import io
from typing import Iterable

from app.domain.models import AnnotatedRecord

CSV_HEADER = ["Name", "Role", "Group"]


def records_to_csv(records: Iterable[AnnotatedRecord]) -> str:
    """
    Render records as RFC 4180 CSV. Fields containing commas, quotes or
    newlines are quoted, embedded quotes doubled.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in records:
        writer.writerow(record.as_row())
    return buf.getvalue()
