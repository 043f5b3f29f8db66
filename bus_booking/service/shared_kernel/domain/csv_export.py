"""CSV rendering shared by the booking and seat exports"""

import csv
from datetime import date, datetime
from decimal import Decimal
import io
from typing import Any, Iterable, Sequence
from uuid import UUID


def format_cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return f'{value:.2f}'
    if isinstance(value, UUID):
        return str(value)
    return str(value)


def render_csv(header: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Header row first, always, even when there are no rows"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(header)
    for row in rows:
        writer.writerow([format_cell(value) for value in row])
    return buffer.getvalue()
