"""Text rendering for sweets, tables and statistics."""

from __future__ import annotations

from typing import Iterable

import click

from sweetshop.models import LOW_STOCK_THRESHOLD, Sweet
from sweetshop.stats import InventoryStats
from sweetshop.utils import truncate_string

DEFAULT_CURRENCY = "₹"
TABLE_WIDTH = 80


def format_currency(value: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format a value as e.g. "₹50.00"."""
    return f"{currency}{value:.2f}"


def rule(width: int = TABLE_WIDTH) -> str:
    return click.style("─" * width, dim=True)


def format_header(currency: str = DEFAULT_CURRENCY) -> str:
    return (
        f"{'ID':<6} {'Name':<20} {'Category':<18} "
        f"{f'Price ({currency})':>10} {'Quantity':>10}"
    )


def format_row(sweet: Sweet, flag_low_stock: bool = True) -> str:
    """One table row; low-stock rows get a yellow marker."""
    row = (
        f"{sweet.id:<6} {truncate_string(sweet.name, 20):<20} "
        f"{truncate_string(sweet.category or '', 18):<18} "
        f"{sweet.price:>10.2f} {sweet.quantity:>10}"
    )
    if flag_low_stock and sweet.is_low_stock:
        row += click.style(" ⚠ low", fg="yellow")
    return row


def format_table(
    sweets: Iterable[Sweet],
    currency: str = DEFAULT_CURRENCY,
    flag_low_stock: bool = True,
) -> str:
    """
    Render sweets as a fixed-width table

    Args:
        sweets: Sweets in display order
        currency: Currency symbol for the price column header
        flag_low_stock: Mark rows below the low-stock threshold

    Returns:
        Multi-line table text (header, rows, footer rule)
    """
    lines = [rule(), click.style(format_header(currency), bold=True), rule()]
    lines.extend(format_row(s, flag_low_stock) for s in sweets)
    lines.append(rule())
    return "\n".join(lines)


def _label(text: str) -> str:
    return click.style(text, bold=True)


def format_sweet(sweet: Sweet, currency: str = DEFAULT_CURRENCY) -> str:
    """Multi-line detail view of a single sweet."""
    lines = [
        click.style(f"Sweet #{sweet.id}", fg="cyan", bold=True),
        f"{_label('Name:')} {sweet.name}",
        f"{_label('Category:')} {sweet.category}",
        f"{_label('Price:')} {format_currency(sweet.price, currency)}",
        f"{_label('Quantity:')} {sweet.quantity}",
    ]
    return "\n".join(lines)


def format_stats(
    stats: InventoryStats,
    low_stock: Iterable[Sweet] = (),
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """
    Render inventory statistics followed by the low-stock list

    Args:
        stats: Computed statistics
        low_stock: Sweets below the threshold, listed under "Stock Status"
        currency: Currency symbol
    """
    lines = [
        click.style("Inventory Statistics", bold=True),
        rule(40),
        f"Total Items: {stats.count}",
        f"Total Quantity: {stats.total_quantity}",
        f"Total Value: {format_currency(stats.total_value, currency)}",
        f"Average Price: {format_currency(stats.average_price, currency)}",
        f"Categories: {stats.category_count}",
        f"Low Stock Items: {stats.low_stock_count}",
    ]

    low = list(low_stock)
    lines.append("")
    lines.append(click.style("Stock Status:", bold=True))
    if low:
        for sweet in low:
            lines.append(
                click.style(f"  ⚠  {sweet.name} - Only {sweet.quantity} left", fg="yellow")
            )
    else:
        lines.append(f"  All sweets have at least {LOW_STOCK_THRESHOLD} units in stock.")

    return "\n".join(lines)
