"""Read source workbooks into flat row records.

A source is an ``.xlsx`` workbook whose first row names the columns
(``Chapter``, ``Section``, ``Order``, ``Type``, ``Lang``, ``Body``,
``Collapsed``). Rows are returned as mappings keyed by the canonical column
name; interpretation of the values is left to
:mod:`docforge.generator.normalizer`.
"""

from __future__ import annotations

import logging
import typing as typ
import zipfile

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from .errors import WorkbookError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

COLUMNS = ("Chapter", "Section", "Order", "Type", "Lang", "Body", "Collapsed")
_CANONICAL = {name.lower(): name for name in COLUMNS}

RawRow = dict[str, object]


def _header_names(header: tuple[object, ...]) -> list[str | None]:
    """Map header cells to canonical column names; unknown columns become None."""
    names: list[str | None] = []
    for cell in header:
        key = str(cell).strip().lower() if cell is not None else ""
        names.append(_CANONICAL.get(key))
    return names


def _is_blank(values: tuple[object, ...]) -> bool:
    return all(value is None or str(value).strip() == "" for value in values)


def read_workbook_rows(path: Path, sheet_name: str | None = None) -> list[RawRow]:
    """Return the data rows of ``sheet_name`` (or the first sheet) in ``path``.

    Parameters
    ----------
    path : Path
        Workbook to read.
    sheet_name : str, optional
        Worksheet holding the content rows; the first worksheet when omitted.

    Returns
    -------
    list[dict[str, object]]
        One mapping per non-blank data row, keyed by canonical column name.
        Columns missing from the header are absent from the mapping; extra
        columns are ignored. An empty list means the sheet has no data rows.

    Raises
    ------
    WorkbookError
        If the file is not a readable workbook or the worksheet is missing.
    """
    try:
        workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        msg = f"Unable to read workbook '{path}': {exc}"
        raise WorkbookError(msg) from exc

    try:
        if sheet_name is None:
            if not workbook.worksheets:
                msg = f"Workbook '{path}' contains no worksheets."
                raise WorkbookError(msg)
            worksheet = workbook.worksheets[0]
        elif sheet_name in workbook.sheetnames:
            worksheet = workbook[sheet_name]
        else:
            available = ", ".join(workbook.sheetnames)
            msg = f"Workbook '{path}' has no sheet '{sheet_name}'. Sheets: {available}"
            raise WorkbookError(msg)

        row_iter = worksheet.iter_rows(values_only=True)
        header = next(row_iter, None)
        if header is None:
            return []
        columns = _header_names(header)

        rows: list[RawRow] = []
        for values in row_iter:
            if _is_blank(values):
                continue
            record: RawRow = {}
            for column, value in zip(columns, values, strict=False):
                if column is not None and column not in record:
                    record[column] = value
            rows.append(record)
    finally:
        workbook.close()

    logger.debug("read %d row(s) from %s", len(rows), path)
    return rows


__all__ = ["COLUMNS", "RawRow", "read_workbook_rows"]
