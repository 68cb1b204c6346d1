from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

import pandas as pd
from openpyxl.utils import get_column_letter

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..core.constants import EXPORT_COLUMNS, EXPORT_FILENAME, EXPORT_SHEET_NAME
from ..core.exceptions import ExportError

logger = logging.getLogger(__name__)

_COLUMN_WIDTHS = [8, 15, 25, 12, 10, 10, 30]


def default_export_dir() -> Path:
    """The user's Desktop when present, else the working directory."""
    desktop = Path.home() / "Desktop"
    if desktop.is_dir():
        return desktop
    return Path.cwd()


def to_rows(records: Iterable[AttendanceRecord]) -> list[list[object]]:
    """One spreadsheet row per record, in the order given."""
    return [
        [
            r.id,
            r.employee_id,
            r.employee_name or "",
            r.timestamp.strftime("%Y-%m-%d"),
            r.timestamp.strftime("%H:%M:%S"),
            r.type.label,
            r.notes or "",
        ]
        for r in records
    ]


class ExportProjector:
    """Writes a query result to an .xlsx workbook.

    The records are written exactly as received: no filtering, no sorting.
    """

    def __init__(self, *, export_dir: Optional[str | Path] = None, clock: Callable = now_local):
        self._export_dir = Path(export_dir) if export_dir else None
        self._clock = clock

    def target_path(self) -> Path:
        directory = self._export_dir or default_export_dir()
        return directory / EXPORT_FILENAME.format(day=self._clock().strftime("%Y-%m-%d"))

    def export(self, records: Iterable[AttendanceRecord]) -> Path:
        path = self.target_path()
        df = pd.DataFrame(to_rows(records), columns=EXPORT_COLUMNS)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with pd.ExcelWriter(path, engine="openpyxl") as writer:
                df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
                sheet = writer.sheets[EXPORT_SHEET_NAME]
                for idx, width in enumerate(_COLUMN_WIDTHS, start=1):
                    sheet.column_dimensions[get_column_letter(idx)].width = width
        except OSError as e:
            logger.exception("Export to %s failed", path)
            raise ExportError(f"Could not write export file {path}: {e}") from e

        logger.info("Exported %d attendance records to %s", len(df), path)
        return path
