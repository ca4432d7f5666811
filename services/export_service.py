"""
services/export_service.py
---------------------------
Generates the CSV export of a user's transactions.

Format:
    Date,Type,Category,Description,Amount,Currency
    2024-05-01,income,Salary,"Bi-weekly ""main"" job",3500.00,USD
"""

import io
from datetime import date
from typing import Optional

import pandas as pd

from models.transaction import Transaction
from utils.logger import get_logger

logger = get_logger(__name__)

CSV_COLUMNS = ["Date", "Type", "Category", "Description", "Amount", "Currency"]


class ExportService:
    """Generates downloadable transaction reports."""

    def build_frame(self, transactions: list[Transaction], currency: str) -> pd.DataFrame:
        """
        Shape transactions into export columns, every cell already rendered as text.
        """
        df = pd.DataFrame(
            [
                {
                    "Date": t.day.isoformat(),
                    "Type": t.type.value,
                    "Category": t.category.value,
                    "Description": t.description,
                    "Amount": t.amount,
                }
                for t in transactions
            ],
            columns=CSV_COLUMNS[:-1],
        )
        df["Description"] = '"' + df["Description"].astype(str).str.replace('"', '""', regex=False) + '"'
        df["Amount"] = df["Amount"].map(lambda v: f"{v:.2f}")
        df["Currency"] = currency
        return df

    def render_csv(self, transactions: list[Transaction], currency: str) -> str:
        """CSV text: header plus one line per transaction, joined with '\\n'."""
        df = self.build_frame(transactions, currency)
        rows = df.apply(",".join, axis=1).tolist() if not df.empty else []
        return "\n".join([",".join(CSV_COLUMNS), *rows])

    def export_csv(self, transactions: list[Transaction], currency: str) -> io.BytesIO:
        """
        Export transactions as a CSV file.

        Returns:
            A BytesIO buffer containing UTF-8 CSV data.
        """
        buffer = io.BytesIO(self.render_csv(transactions, currency).encode("utf-8"))
        buffer.seek(0)
        logger.info(f"Exported {len(transactions)} transactions as CSV ({currency})")
        return buffer

    @staticmethod
    def filename(today: Optional[date] = None) -> str:
        return f"finsight_export_{(today or date.today()).isoformat()}.csv"
