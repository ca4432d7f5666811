"""
Tests for the CSV export.
"""

from datetime import date

from conftest import tx
from services.export_service import ExportService

HEADER = "Date,Type,Category,Description,Amount,Currency"


class TestCsvExport:
    """Tests for ExportService CSV output."""

    def setup_method(self):
        self.service = ExportService()

    def test_scenario_rows(self, sample):
        lines = self.service.render_csv(sample, "USD").split("\n")
        assert lines[0] == HEADER
        assert lines[1] == '2024-05-20,income,Salary,"",100.00,USD'
        expense_rows = [line for line in lines[1:] if ",expense," in line]
        assert len(expense_rows) == 2
        assert sum(float(row.split(",")[4]) for row in expense_rows) == 50.00

    def test_one_row_per_transaction_in_given_order(self, sample):
        lines = self.service.render_csv(sample, "USD").split("\n")
        assert len(lines) == 1 + len(sample)
        assert [line.split(",")[2] for line in lines[1:]] == ["Salary", "Groceries", "Entertainment"]

    def test_quotes_in_description_are_doubled(self):
        rows = self.service.render_csv([tx(5, description='The "good" stuff, cheap')], "EUR")
        assert rows.split("\n")[1] == '2024-05-20,expense,Other,"The ""good"" stuff, cheap",5.00,EUR'

    def test_amount_has_two_decimals(self):
        rows = self.service.render_csv([tx(3.4567), tx(1234567)], "JPY").split("\n")
        assert rows[1].endswith(",3.46,JPY")
        assert rows[2].endswith(",1234567.00,JPY")

    def test_empty_collection_is_header_only(self):
        assert self.service.render_csv([], "USD") == HEADER

    def test_export_buffer_is_utf8(self, sample):
        buffer = self.service.export_csv(sample, "INR")
        text = buffer.getvalue().decode("utf-8")
        assert text.startswith(HEADER)
        assert text.endswith(",INR")

    def test_filename_pattern(self):
        assert ExportService.filename(date(2024, 5, 20)) == "finsight_export_2024-05-20.csv"
