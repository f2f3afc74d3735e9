"""Implementation of the sweetshop shell command."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import click

from sweetshop.config import get_setting, load_config
from sweetshop.display import (
    DEFAULT_CURRENCY,
    format_sweet,
    format_stats,
    format_table,
    rule,
)
from sweetshop.errors import SweetShopError
from sweetshop.logger import ActivityLog, ShopLogger
from sweetshop.sample_data import build_shop
from sweetshop.shop import SweetShop

MENU = [
    (1, "View All Sweets"),
    (2, "Add New Sweet"),
    (3, "Delete Sweet"),
    (4, "Search Sweets"),
    (5, "Purchase Sweet"),
    (6, "Restock Sweet"),
    (7, "Sort Sweets"),
    (8, "Display Statistics"),
    (9, "Update Sweet"),
    (0, "Exit"),
]


class ShopShell:
    """Numbered text menu over a SweetShop.

    Reads choices and field values with click prompts, which re-prompt on
    malformed numbers. Inventory errors are printed and the menu continues.
    """

    def __init__(
        self,
        shop: SweetShop,
        currency: str = DEFAULT_CURRENCY,
        shop_name: str = "Sweet Shop",
        logger: ShopLogger | None = None,
    ) -> None:
        self.shop = shop
        self.currency = currency
        self.shop_name = shop_name
        self.logger = logger
        self._actions: dict[int, Callable[[], None]] = {
            1: self.view_all,
            2: self.add_sweet,
            3: self.delete_sweet,
            4: self.search_sweets,
            5: self.purchase_sweet,
            6: self.restock_sweet,
            7: self.sort_sweets,
            8: self.show_statistics,
            9: self.update_sweet,
        }

    def run(self) -> None:
        """Show the menu until the user picks 0 or input ends."""
        click.echo(click.style(f"{self.shop_name} Management System", fg="magenta", bold=True))

        while True:
            self._print_menu()
            try:
                choice = click.prompt("Enter your choice", type=int)
            except click.Abort:
                click.echo("")
                break
            click.echo("")

            if choice == 0:
                click.echo(f"Thank you for using {self.shop_name} Management System!")
                break

            action = self._actions.get(choice)
            if action is None:
                self._error("Invalid choice. Please try again.")
                continue

            try:
                action()
            except click.Abort:
                click.echo("")
                break

            click.pause("\nPress any key to continue...")

    def _print_menu(self) -> None:
        click.echo("")
        click.echo(click.style("MAIN MENU", bold=True))
        click.echo(rule(40))
        for number, label in MENU:
            click.echo(f"  {number}. {label}")
        click.echo(rule(40))

    # ---- Menu actions ----

    def view_all(self) -> None:
        click.echo(click.style("All Sweets in Inventory:", bold=True))
        sweets = self.shop.list()
        if not sweets:
            click.echo("No sweets available in inventory.")
            return
        click.echo(format_table(sweets, self.currency))
        click.echo(f"Total items: {len(sweets)}")

    def add_sweet(self) -> None:
        click.echo(click.style("Add New Sweet", bold=True))
        name = click.prompt("Enter sweet name")
        category = click.prompt("Enter category", default="", show_default=False)
        price = click.prompt(f"Enter price ({self.currency})", type=float)
        quantity = click.prompt("Enter quantity", type=int)

        sweet = self._attempt(
            "add", None, self.shop.create, name.strip(), category.strip(), price, quantity
        )
        if sweet is not None:
            self._success("Sweet added successfully!")
            click.echo(format_sweet(sweet, self.currency))

    def delete_sweet(self) -> None:
        click.echo(click.style("Delete Sweet", bold=True))
        sweet_id = click.prompt("Enter sweet ID to delete", type=int)

        sweet = self.shop.get(sweet_id)
        if sweet is None:
            self._error(f"Sweet with ID {sweet_id} not found.")
            return

        click.echo(f"Sweet to delete: {sweet.name}")
        if not click.confirm("Are you sure?", default=False):
            click.echo("Deletion cancelled.")
            return

        if self.shop.delete(sweet_id):
            self._success("Sweet deleted successfully!")
        else:
            self._error("Failed to delete sweet.")

    def search_sweets(self) -> None:
        click.echo(click.style("Search Sweets", bold=True))
        click.echo("  1. Search by Name")
        click.echo("  2. Search by Category")
        click.echo("  3. Search by Price Range")
        choice = click.prompt("Enter choice", type=int)

        if choice == 1:
            term = click.prompt("Enter name to search", default="", show_default=False)
            results = self.shop.search_by_name(term)
        elif choice == 2:
            term = click.prompt("Enter category", default="", show_default=False)
            results = self.shop.search_by_category(term)
        elif choice == 3:
            min_price = click.prompt("Enter minimum price", type=float)
            max_price = click.prompt("Enter maximum price", type=float)
            results = self._attempt(
                "search", None, self.shop.search_by_price_range, min_price, max_price
            )
            if results is None:
                return
        else:
            self._error("Invalid choice.")
            return

        click.echo("")
        click.echo(click.style("Search Results:", bold=True))
        if not results:
            click.echo("No sweets found matching your criteria.")
            return
        click.echo(format_table(results, self.currency, flag_low_stock=False))
        click.echo(f"Found: {len(results)} item(s)")

    def purchase_sweet(self) -> None:
        click.echo(click.style("Purchase Sweet", bold=True))
        sweet = self._prompt_existing_sweet()
        if sweet is None:
            return

        click.echo(f"Sweet: {sweet.name}")
        click.echo(f"Available quantity: {sweet.quantity}")
        amount = click.prompt("Enter quantity to purchase", type=int)

        if self._attempt("purchase", sweet.id, self.shop.purchase, sweet.id, amount):
            self._success(f"Purchased {amount} {sweet.name}(s) successfully!")
            click.echo(f"Remaining stock: {sweet.quantity}")

    def restock_sweet(self) -> None:
        click.echo(click.style("Restock Sweet", bold=True))
        sweet = self._prompt_existing_sweet()
        if sweet is None:
            return

        click.echo(f"Sweet: {sweet.name}")
        click.echo(f"Current quantity: {sweet.quantity}")
        amount = click.prompt("Enter quantity to add", type=int)

        if self._attempt("restock", sweet.id, self.shop.restock, sweet.id, amount):
            self._success(f"Restocked {amount} {sweet.name}(s) successfully!")
            click.echo(f"New stock: {sweet.quantity}")

    def sort_sweets(self) -> None:
        click.echo(click.style("Sort Sweets", bold=True))
        click.echo("  1. Sort by Name")
        click.echo("  2. Sort by Price")
        choice = click.prompt("Enter choice", type=int)

        if choice == 1:
            sweets, label = self.shop.sorted_by_name(), "Name"
        elif choice == 2:
            sweets, label = self.shop.sorted_by_price(), "Price"
        else:
            self._error("Invalid choice.")
            return

        click.echo("")
        click.echo(click.style(f"Sweets sorted by {label}:", bold=True))
        click.echo(format_table(sweets, self.currency, flag_low_stock=False))

    def show_statistics(self) -> None:
        click.echo(
            format_stats(self.shop.statistics(), self.shop.low_stock(), self.currency)
        )

    def update_sweet(self) -> None:
        click.echo(click.style("Update Sweet", bold=True))
        sweet = self._prompt_existing_sweet()
        if sweet is None:
            return

        click.echo(format_sweet(sweet, self.currency))
        click.echo("Press Enter to keep the current value.")
        name = click.prompt("New name", default=sweet.name)
        category = click.prompt("New category", default=sweet.category or "")
        price = click.prompt(f"New price ({self.currency})", default=sweet.price, type=float)
        quantity = click.prompt("New quantity", default=sweet.quantity, type=int)

        changes: dict[str, Any] = {}
        for field, new, old in (
            ("name", name, sweet.name),
            ("category", category, sweet.category),
            ("price", price, sweet.price),
            ("quantity", quantity, sweet.quantity),
        ):
            if new != old:
                changes[field] = new

        if not changes:
            click.echo("Nothing to update.")
            return

        if self._attempt("update", sweet.id, self.shop.update, sweet.id, **changes):
            self._success("Sweet updated successfully!")
            click.echo(format_sweet(sweet, self.currency))

    # ---- Helpers ----

    def _prompt_existing_sweet(self):
        sweet_id = click.prompt("Enter sweet ID", type=int)
        sweet = self.shop.get(sweet_id)
        if sweet is None:
            self._error(f"Sweet with ID {sweet_id} not found.")
        return sweet

    def _attempt(self, operation: str, sweet_id: int | None, func, *args, **kwargs):
        """Run a shop call, printing inventory errors instead of raising.

        Returns:
            The call's result, or None if it raised a SweetShopError
        """
        try:
            return func(*args, **kwargs)
        except SweetShopError as e:
            self._error(f"Error: {e}")
            if self.logger:
                self.logger.warning(
                    f"{operation} failed",
                    operation=operation,
                    sweet_id=sweet_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
            return None

    def _success(self, message: str) -> None:
        click.echo(click.style(message, fg="green"))

    def _error(self, message: str) -> None:
        click.echo(click.style(message, fg="red"))


def run_shell(sample_data: bool | None = None) -> None:
    """Run the shell command implementation.

    Args:
        sample_data: Seed the demo sweets; None falls back to
            shop.seed_sample_data in the configuration
    """
    config = load_config()
    seed = (
        get_setting(config, "shop.seed_sample_data", True)
        if sample_data is None
        else sample_data
    )

    logger = None
    activity = None
    if get_setting(config, "logging.enabled", True):
        log_dir = Path(get_setting(config, "logging.dir", ".sweetshop/logs"))
        logger = ShopLogger(log_dir=log_dir, console=False)
        activity = ActivityLog(log_dir=log_dir)

    shop = build_shop(config, seed)
    shop.activity = activity

    if logger:
        logger.info("Shell started", sweets=shop.size(), sample_data=seed)

    shell = ShopShell(
        shop,
        currency=get_setting(config, "display.currency", DEFAULT_CURRENCY),
        shop_name=get_setting(config, "shop.name", "Sweet Shop"),
        logger=logger,
    )
    try:
        shell.run()
    finally:
        if activity:
            activity.end_session()
        if logger:
            logger.info("Shell stopped", sweets=shop.size())
