"""CSV and Excel export for rotation previews."""
from pathlib import Path
from typing import Union

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from carerota.models.schedule import RotaPreview
from carerota.utils.logging_setup import get_logger

logger = get_logger("carerota.io.export")

SHEET_NAME = "Rotation"

HEADER_FILL = PatternFill("solid", start_color="DDEEFF", end_color="DDEEFF")
OVERRIDE_FILL = PatternFill("solid", start_color="FFE4CC", end_color="FFE4CC")
THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)

HEADERS = {
    "year": "Year",
    "week": "Week",
    "start_date": "From",
    "end_date": "To",
    "caretaker": "Caretaker",
    "regular_caretaker": "Regular",
    "overridden": "Rescheduled",
}


def _export_frame(preview: RotaPreview) -> pd.DataFrame:
    """DataFrame with ISO date strings, ready for CSV or a sheet."""
    df = preview.to_dataframe()
    for col in ("start_date", "end_date"):
        df[col] = df[col].map(lambda d: d.isoformat())
    return df


def _style_sheet(ws, df: pd.DataFrame) -> None:
    for col_idx in range(1, len(df.columns) + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = BORDER_THIN

    overridden = list(df["overridden"])
    for row_idx, flag in enumerate(overridden, start=2):
        for col_idx in range(1, len(df.columns) + 1):
            cell = ws.cell(row=row_idx, column=col_idx)
            cell.border = BORDER_THIN
            if flag:
                cell.fill = OVERRIDE_FILL

    for col_idx, col in enumerate(df.columns, start=1):
        width = max([len(str(HEADERS.get(col, col)))] + [len(str(v)) for v in df[col]])
        ws.column_dimensions[get_column_letter(col_idx)].width = width + 2

    ws.freeze_panes = "A2"


def export_to_excel(preview: RotaPreview, path: Union[str, Path]) -> Path:
    """
    Export preview to a styled Excel sheet.

    Rescheduled weeks are highlighted.
    """
    path = Path(path)
    df = _export_frame(preview)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.rename(columns=HEADERS).to_excel(writer, sheet_name=SHEET_NAME, index=False)
        _style_sheet(writer.sheets[SHEET_NAME], df)
    return path


def export_to_csv(preview: RotaPreview, path: Union[str, Path]) -> Path:
    path = Path(path)
    _export_frame(preview).to_csv(path, index=False)
    return path


def export_schedule(preview: RotaPreview, path: Union[str, Path]) -> Path:
    """
    Export preview, choosing the format from the file suffix.

    Args:
        preview: Generated rotation preview
        path: Destination ending in .csv or .xlsx

    Returns:
        Path written
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (".csv", ".xlsx"):
        raise ValueError(f"unsupported export format {path.suffix or '(none)'}: use .csv or .xlsx")

    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        export_to_csv(preview, path)
    else:
        export_to_excel(preview, path)
    logger.info(f"Exported {len(preview)} week(s) to {path}")
    return path
