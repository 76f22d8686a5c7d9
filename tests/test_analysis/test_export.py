"""Tests for data export module."""

import io

import pandas as pd
import pytest


@pytest.fixture
def columns():
    from src.tables import ColumnDef

    return [
        ColumnDef("id", "ID", essential=True),
        ColumnDef("client_name", "Client"),
        ColumnDef("avg", "Avg Budget", accessor=lambda r: (r["budget_min"] + r["budget_max"]) / 2),
    ]


@pytest.fixture
def records():
    return [
        {"id": "MP-1", "client_name": "Greenfield", "budget_min": 100, "budget_max": 200},
        {"id": "MP-2", "client_name": "Summit", "budget_min": 400, "budget_max": 600},
    ]


class TestRecordsToDataFrame:
    """Tests for records_to_dataframe."""

    def test_headers_and_accessors(self, records, columns):
        from src.analysis.export import records_to_dataframe

        df = records_to_dataframe(records, columns)
        assert list(df.columns) == ["ID", "Client", "Avg Budget"]
        assert df["Avg Budget"].tolist() == [150, 500]

    def test_empty(self, columns):
        from src.analysis.export import records_to_dataframe

        df = records_to_dataframe([], columns)
        assert len(df) == 0
        assert list(df.columns) == ["ID", "Client", "Avg Budget"]


class TestDataExporter:
    """Tests for DataExporter class."""

    def test_export_to_csv_buffer(self, records, columns):
        from src.analysis.export import DataExporter

        buffer = DataExporter().export_to_csv_buffer(records, columns)

        assert isinstance(buffer, io.StringIO)
        lines = buffer.read().strip().split("\n")
        assert lines[0] == "ID,Client,Avg Budget"
        assert len(lines) == 3

    def test_export_to_csv_file(self, records, columns, tmp_path):
        from src.analysis.export import DataExporter

        exporter = DataExporter(output_dir=tmp_path / "exports")
        path = exporter.export_to_csv(records, columns[:2], filename="out.csv")

        assert path.exists()
        assert pd.read_csv(path)["ID"].tolist() == ["MP-1", "MP-2"]

    def test_export_to_excel_buffer(self, records, columns):
        from src.analysis.export import DataExporter
        from src.filtering import ActiveFilter, ResultSummary

        summary = ResultSummary(result_count=2, total_count=8, filters_active=True)
        chips = [ActiveFilter("status", "Status", "open", "Open")]
        buffer = DataExporter().export_to_excel_buffer(records, columns, summary, chips)

        sheets = pd.read_excel(buffer, sheet_name=None)
        assert set(sheets) == {"Results", "Statistics"}
        assert len(sheets["Results"]) == 2

        stats = dict(zip(sheets["Statistics"]["Metric"], sheets["Statistics"]["Value"]))
        assert str(stats["Matching Records"]) == "2"
        assert str(stats["Total Records"]) == "8"
        assert stats["Filter: Status"] == "Open"

    def test_export_to_excel_file(self, records, columns, tmp_path):
        from src.analysis.export import DataExporter

        exporter = DataExporter(output_dir=tmp_path)
        path = exporter.export_to_excel(records, columns, filename="out.xlsx")
        assert path.exists()

    def test_generate_filename(self):
        from src.analysis.export import DataExporter

        exporter = DataExporter()
        assert exporter.generate_filename("invoices", "xlsx", include_timestamp=False) == "invoices.xlsx"

        stamped = exporter.generate_filename("invoices", "csv")
        assert stamped.startswith("invoices_")
        assert stamped.endswith(".csv")
