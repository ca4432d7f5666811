"""
services/chart_service.py
--------------------------
Renders dashboard views as PNG images.
Uses matplotlib to draw the balance trend, daily income/expense bars,
the expense pie and the income doughnut, returning BytesIO buffers.
"""

import io

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for server use
import matplotlib.pyplot as plt

from models.app_state import Theme
from models.currency import currency_symbol
from services.aggregation import CategoryTotal, DailyBalance
from utils.logger import get_logger

logger = get_logger(__name__)

COLORS = ["#0ea5e9", "#22c55e", "#eab308", "#f97316", "#ef4444", "#8b5cf6", "#ec4899", "#64748b"]
INCOME_COLOR = "#22c55e"
EXPENSE_COLOR = "#ef4444"
BALANCE_COLOR = "#0ea5e9"

_PALETTES = {
    Theme.DARK: {"face": "#0f172a", "text": "#e2e8f0", "grid": "#334155"},
    Theme.LIGHT: {"face": "#ffffff", "text": "#0f172a", "grid": "#cbd5e1"},
}


class ChartService:
    """Draws dashboard charts in the user's theme."""

    def __init__(self, theme: Theme = Theme.DARK):
        self.palette = _PALETTES[theme]

    def _new_figure(self, size=(9, 5)):
        fig, ax = plt.subplots(figsize=size)
        fig.set_facecolor(self.palette["face"])
        ax.set_facecolor(self.palette["face"])
        ax.tick_params(colors=self.palette["text"])
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)
        for side in ("left", "bottom"):
            ax.spines[side].set_color(self.palette["grid"])
        return fig, ax

    def _to_png(self, fig) -> io.BytesIO:
        plt.tight_layout()
        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=150, bbox_inches="tight",
                    facecolor=fig.get_facecolor())
        buf.seek(0)
        plt.close(fig)
        return buf

    def balance_trend(self, daily: list[DailyBalance], currency: str) -> io.BytesIO:
        """Area chart of the running balance across the window."""
        fig, ax = self._new_figure()
        x = range(len(daily))
        balances = [d.balance for d in daily]
        ax.plot(x, balances, color=BALANCE_COLOR, linewidth=2, zorder=3)
        ax.fill_between(x, balances, color=BALANCE_COLOR, alpha=0.2)

        step = max(1, len(daily) // 10)
        ax.set_xticks(list(x)[::step])
        ax.set_xticklabels([d.date for d in daily][::step], fontsize=9)
        ax.set_ylabel(f"Balance ({currency_symbol(currency)})", color=self.palette["text"])
        ax.set_title("Balance Trend", color=self.palette["text"], fontsize=13, fontweight="bold")
        ax.grid(axis="y", alpha=0.3, color=self.palette["grid"], linestyle="--")
        ax.set_axisbelow(True)

        logger.info(f"Rendered balance trend over {len(daily)} days")
        return self._to_png(fig)

    def daily_bars(self, daily: list[DailyBalance], currency: str) -> io.BytesIO:
        """Side-by-side income and expense bars per day."""
        fig, ax = self._new_figure()
        x = list(range(len(daily)))
        width = 0.4
        ax.bar([i - width / 2 for i in x], [d.income for d in daily], width,
               color=INCOME_COLOR, label="Income", zorder=3)
        ax.bar([i + width / 2 for i in x], [d.expense for d in daily], width,
               color=EXPENSE_COLOR, label="Expense", zorder=3)

        step = max(1, len(daily) // 10)
        ax.set_xticks(x[::step])
        ax.set_xticklabels([d.date for d in daily][::step], fontsize=9)
        ax.set_ylabel(f"Amount ({currency_symbol(currency)})", color=self.palette["text"])
        ax.set_title("Daily Activity", color=self.palette["text"], fontsize=13, fontweight="bold")
        ax.legend(frameon=False, labelcolor=self.palette["text"])
        ax.grid(axis="y", alpha=0.3, color=self.palette["grid"])
        ax.set_axisbelow(True)
        return self._to_png(fig)

    def category_pie(self, totals: list[CategoryTotal], currency: str, title: str,
                     doughnut: bool = False) -> io.BytesIO | None:
        """
        Pie (or doughnut) of category totals.

        Returns:
            BytesIO buffer with PNG image, or None if there is nothing to draw.
        """
        if not totals:
            return None

        fig, ax = self._new_figure(size=(8, 6))
        values = [t.value for t in totals]
        wedge_props = {"edgecolor": self.palette["face"], "linewidth": 2}
        if doughnut:
            wedge_props["width"] = 0.45

        wedges, _, autotexts = ax.pie(
            values,
            labels=None,
            autopct=lambda pct: f"{pct:.1f}%",
            colors=[COLORS[i % len(COLORS)] for i in range(len(values))],
            startangle=90,
            pctdistance=0.78 if doughnut else 0.6,
            wedgeprops=wedge_props,
        )
        for autotext in autotexts:
            autotext.set_color("white")
            autotext.set_fontsize(9)

        symbol = currency_symbol(currency)
        ax.legend(
            wedges, [f"{t.name}: {symbol}{t.value:,.2f}" for t in totals],
            loc="center left", bbox_to_anchor=(1, 0, 0.5, 1),
            frameon=False, labelcolor=self.palette["text"],
        )
        ax.set_title(f"{title}\nTotal: {symbol}{sum(values):,.2f}",
                     color=self.palette["text"], fontsize=13, fontweight="bold")
        return self._to_png(fig)
