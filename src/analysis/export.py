"""Export of table views to CSV and Excel."""

import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime
import io
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

from src.filtering.models import ActiveFilter
from src.filtering.results import ResultSummary
from src.tables.columns import ColumnDef

logger = get_logger("export")

DATA_SHEET = "Results"
STATISTICS_SHEET = "Statistics"

# Widths (characters) applied to matching headers
DEFAULT_COLUMN_WIDTH = 16
WIDE_COLUMN_WIDTH = 32
WIDE_COLUMN_IDS = {
    "property_address",
    "service_description",
    "project_description",
    "subject",
    "description",
    "client_name",
}


def records_to_dataframe(records: Sequence[Any], columns: Sequence[ColumnDef]) -> pd.DataFrame:
    """
    Build a DataFrame of the given columns, headed by column headers.

    Args:
        records: Rows in display order.
        columns: Columns to include, in display order.

    Returns:
        DataFrame with one row per record.
    """
    data = [[column.value(record) for column in columns] for record in records]
    return pd.DataFrame(data, columns=[column.header for column in columns])


class DataExporter:
    """Export result sets to various formats."""

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for file exports.
        """
        self.output_dir = Path(output_dir) if output_dir else config.export.exports_path

    def export_to_csv(
        self,
        records: Sequence[Any],
        columns: Sequence[ColumnDef],
        filename: Optional[str] = None,
    ) -> Path:
        """
        Export rows to a CSV file.

        Args:
            records: Rows to export (typically the whole result set).
            columns: Visible columns.
            filename: Output filename (generated if None).

        Returns:
            Path to exported file.
        """
        if filename is None:
            filename = self.generate_filename(extension="csv")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        df = records_to_dataframe(records, columns)
        filepath = self.output_dir / filename
        df.to_csv(filepath, index=False, encoding="utf-8")

        logger.info(f"Exported {len(df)} records to {filepath}")
        return filepath

    def export_to_csv_buffer(
        self,
        records: Sequence[Any],
        columns: Sequence[ColumnDef],
    ) -> io.StringIO:
        """
        Export rows to an in-memory CSV buffer (for Streamlit download).

        Args:
            records: Rows to export.
            columns: Visible columns.

        Returns:
            StringIO buffer with CSV data.
        """
        df = records_to_dataframe(records, columns)
        buffer = io.StringIO()
        df.to_csv(buffer, index=False)
        buffer.seek(0)
        return buffer

    def export_to_excel(
        self,
        records: Sequence[Any],
        columns: Sequence[ColumnDef],
        filename: Optional[str] = None,
        summary: Optional[ResultSummary] = None,
        active_filters: Optional[Sequence[ActiveFilter]] = None,
    ) -> Path:
        """
        Export rows to a formatted Excel file.

        Args:
            records: Rows to export.
            columns: Visible columns.
            filename: Output filename (generated if None).
            summary: Result counts for the statistics sheet.
            active_filters: Filters that produced the rows.

        Returns:
            Path to exported file.
        """
        if filename is None:
            filename = self.generate_filename(extension="xlsx")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.output_dir / filename
        self._write_excel(filepath, records, columns, summary, active_filters)

        logger.info(f"Exported {len(records)} records to Excel: {filepath}")
        return filepath

    def export_to_excel_buffer(
        self,
        records: Sequence[Any],
        columns: Sequence[ColumnDef],
        summary: Optional[ResultSummary] = None,
        active_filters: Optional[Sequence[ActiveFilter]] = None,
    ) -> io.BytesIO:
        """
        Export rows to an in-memory Excel buffer (for Streamlit download).

        Returns:
            BytesIO buffer with Excel data.
        """
        buffer = io.BytesIO()
        self._write_excel(buffer, records, columns, summary, active_filters)
        buffer.seek(0)
        return buffer

    def _write_excel(
        self,
        target,
        records: Sequence[Any],
        columns: Sequence[ColumnDef],
        summary: Optional[ResultSummary],
        active_filters: Optional[Sequence[ActiveFilter]],
    ) -> None:
        df = records_to_dataframe(records, columns)
        widths = {
            column.header: WIDE_COLUMN_WIDTH if column.id in WIDE_COLUMN_IDS else DEFAULT_COLUMN_WIDTH
            for column in columns
        }

        with pd.ExcelWriter(target, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=DATA_SHEET, index=False)
            self._format_sheet(writer.sheets[DATA_SHEET], widths)

            stats_df = self._create_statistics_df(len(df), summary, active_filters)
            stats_df.to_excel(writer, sheet_name=STATISTICS_SHEET, index=False)
            writer.sheets[STATISTICS_SHEET].column_dimensions["A"].width = 24
            writer.sheets[STATISTICS_SHEET].column_dimensions["B"].width = 40

    def _format_sheet(
        self,
        worksheet,
        column_widths: Dict[str, int],
    ) -> None:
        """Apply formatting to Excel worksheet."""
        from openpyxl.styles import Font, PatternFill, Alignment

        # Header formatting
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")

        for cell in worksheet[1]:
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")
            width = column_widths.get(cell.value)
            if width:
                worksheet.column_dimensions[cell.column_letter].width = width

        worksheet.freeze_panes = "A2"
        worksheet.auto_filter.ref = worksheet.dimensions

    def _create_statistics_df(
        self,
        exported: int,
        summary: Optional[ResultSummary],
        active_filters: Optional[Sequence[ActiveFilter]],
    ) -> pd.DataFrame:
        """Create the export metadata sheet."""
        stats: List[Dict[str, Any]] = [{"Metric": "Exported Records", "Value": exported}]

        if summary is not None:
            stats.append({"Metric": "Matching Records", "Value": summary.result_count})
            stats.append({"Metric": "Total Records", "Value": summary.total_count})

        for chip in active_filters or ():
            stats.append({"Metric": f"Filter: {chip.group_label}", "Value": chip.label})

        stats.append({
            "Metric": "Export Date",
            "Value": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        })

        return pd.DataFrame(stats)

    def generate_filename(
        self,
        base_name: str = "fieldops_export",
        extension: str = "csv",
        include_timestamp: bool = True,
    ) -> str:
        """Generate export filename."""
        if include_timestamp:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return f"{base_name}_{timestamp}.{extension}"
        return f"{base_name}.{extension}"
