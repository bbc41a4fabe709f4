"""HTML/CSS and formatting shared by the two earnings pages."""

from __future__ import annotations

import html
from collections.abc import Sequence
from datetime import date

from fuzzywuzzy import fuzz

# --- Page styling ---

PAGE_CSS = """
<style>
    .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }
    .title {
        font-size: 36px;
        font-weight: 700;
        color: #2c3e50;
        margin-top: 10px;
        margin-bottom: 4px;
        text-align: center;
    }
    .subtitle {
        color: #5d6d7e;
        font-size: 18px;
        margin-bottom: 24px;
        text-align: center;
    }
    .stFileUploader > div {
        border: 2px dashed #aeb8c4;
        border-radius: 12px;
        padding: 20px;
        background-color: #ffffff;
    }
    .card-grid {
        display: flex;
        justify-content: center;
        gap: 16px;
        flex-wrap: wrap;
        margin-top: 16px;
        margin-bottom: 24px;
    }
    .card-box {
        background: linear-gradient(145deg, #3b1d8f, #5b2bbf);
        border-radius: 16px;
        box-shadow: 0 12px 24px rgba(0, 0, 0, 0.15);
        padding: 20px;
        min-width: 150px;
        color: white;
        text-align: center;
    }
    .card-box.total {
        background: linear-gradient(145deg, #0f9d58, #0b7a45);
        min-width: 320px;
    }
    .card-title {
        font-size: 15px;
        opacity: 0.85;
        margin-bottom: 6px;
    }
    .card-total {
        font-size: 26px;
        font-weight: 700;
        word-break: break-all;
    }
    .card-box.total .card-total {
        font-size: 40px;
    }
    table.studies {
        width: 100%;
        border-collapse: collapse;
        border-radius: 10px;
        overflow: hidden;
    }
    table.studies th {
        background-color: #4f46e5;
        color: white;
        font-weight: 600;
        padding: 10px 14px;
        text-align: left;
    }
    table.studies td {
        padding: 10px 14px;
        border-bottom: 1px solid #f0f0f0;
    }
    .badge {
        display: inline-block;
        padding: 2px 8px;
        border-radius: 999px;
        font-size: 12px;
        font-weight: 600;
    }
    .badge-positive { background: #dcfce7; color: #166534; }
    .badge-warning { background: #fef9c3; color: #854d0e; }
    .badge-negative { background: #fee2e2; color: #991b1b; }
    .badge-neutral { background: #f3f4f6; color: #1f2937; }
</style>
"""


# --- Formatting ---

def format_currency(amount: float, symbol: str = "$") -> str:
    """``1234.5 -> "$1,234.50"``, ``-3 -> "-$3.00"``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_long_date(day: date) -> str:
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def status_badge_class(status: str | None) -> str:
    lowered = (status or "").lower()
    if "approved" in lowered:
        return "badge-positive"
    if "awaiting" in lowered:
        return "badge-warning"
    if "returned" in lowered or "rejected" in lowered or "timed" in lowered:
        return "badge-negative"
    return "badge-neutral"


def or_na(value: str | None) -> str:
    return value if value else "N/A"


# --- HTML builders ---

def card_html(title: str, value: str, extra_class: str = "") -> str:
    css = f"card-box {extra_class}".strip()
    return (
        f'<div class="{css}"><div class="card-title">{html.escape(title)}</div>'
        f'<div class="card-total">{html.escape(value)}</div></div>'
    )


def card_grid_html(cards: Sequence[tuple[str, str]], extra_class: str = "") -> str:
    inner = "".join(card_html(title, value, extra_class) for title, value in cards)
    return f'<div class="card-grid">{inner}</div>'


def studies_table_html(headers: Sequence[str], rows: Sequence[Sequence[str]], status_index: int) -> str:
    """Render rows as an HTML table, the status column as a colored badge."""
    head = "".join(f"<th>{html.escape(h)}</th>" for h in headers)
    body = []
    for row in rows:
        cells = []
        for index, value in enumerate(row):
            text = html.escape(or_na(value))
            if index == status_index:
                text = f'<span class="badge {status_badge_class(value)}">{text}</span>'
            cells.append(f"<td>{text}</td>")
        body.append(f"<tr>{''.join(cells)}</tr>")
    return f'<table class="studies"><thead><tr>{head}</tr></thead><tbody>{"".join(body)}</tbody></table>'


# --- Column hints ---

def suggest_columns(labels: Sequence[str], headers: Sequence[str], threshold: int = 70) -> dict[str, str]:
    """Closest-looking header per missing label, for the error hint only."""
    cleaned = {h: h.strip().lower() for h in headers if h.strip()}
    suggestions = {}
    for label in labels:
        if not cleaned:
            break
        best = max(cleaned.items(), key=lambda x: fuzz.ratio(x[1], label.lower()))
        if fuzz.ratio(best[1], label.lower()) >= threshold:
            suggestions[label] = best[0]
    return suggestions
