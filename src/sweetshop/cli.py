"""Sweet Shop CLI - inventory manager for a retail sweet shop."""

import json

import click

from sweetshop import __version__
from sweetshop.commands.init import init
from sweetshop.commands.shell import shell
from sweetshop.config import get_setting, load_config
from sweetshop.display import DEFAULT_CURRENCY, format_stats, format_table
from sweetshop.errors import SweetShopError
from sweetshop.sample_data import build_shop
from sweetshop.shop import SORT_KEYS, SweetShop


@click.group()
@click.version_option(version=__version__, prog_name="sweetshop")
def cli() -> None:
    """Sweet Shop - inventory manager for a retail sweet shop.

    Run `sweetshop init` once to write the default configuration, then
    `sweetshop shell` for the interactive menu. The other commands
    report on the demo inventory and exit; nothing is persisted.
    """
    pass


cli.add_command(init)
cli.add_command(shell)


def _load_demo_shop() -> tuple[SweetShop, str]:
    """Build the demo shop and return it with the configured currency."""
    config = load_config()
    currency = get_setting(config, "display.currency", DEFAULT_CURRENCY)
    return build_shop(config, seed=True), currency


def _echo_sweets(sweets: list, output_format: str, currency: str) -> None:
    if output_format == "json":
        data = {
            "total": len(sweets),
            "sweets": [s.to_dict() for s in sweets],
        }
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if not sweets:
        click.echo("No sweets found matching your criteria.")
        return
    click.echo(format_table(sweets, currency))
    click.echo(f"Total items: {len(sweets)}")


@cli.command(name="list")
@click.option(
    "--sort",
    "sort_key",
    default=None,
    type=click.Choice(sorted(SORT_KEYS)),
    help="Sort by field (default: insertion order)",
)
@click.option("--desc", is_flag=True, help="Sort in descending order")
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "json"]),
    help="Output format (default: text)",
)
def list_sweets(sort_key: str | None, desc: bool, output_format: str) -> None:
    """List every sweet in the inventory.

    Examples:

      sweetshop list --sort price

      sweetshop list --sort quantity --desc --format json
    """
    shop, currency = _load_demo_shop()
    sweets = shop.sorted_by(sort_key, descending=desc) if sort_key else shop.list()
    _echo_sweets(sweets, output_format, currency)


@cli.command()
@click.option("--name", "-n", default=None, help="Name contains (case-insensitive)")
@click.option("--category", "-c", default=None, help="Category equals (case-insensitive)")
@click.option("--min-price", type=float, default=None, help="Minimum price (inclusive)")
@click.option("--max-price", type=float, default=None, help="Maximum price (inclusive)")
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "json"]),
    help="Output format (default: text)",
)
def search(
    name: str | None,
    category: str | None,
    min_price: float | None,
    max_price: float | None,
    output_format: str,
) -> None:
    """Search sweets by name, category and price range.

    All given criteria must match.

    Examples:

      sweetshop search --name jamun

      sweetshop search --category milk-based --max-price 11
    """
    shop, currency = _load_demo_shop()
    try:
        results = shop.filter(
            name=name, category=category, min_price=min_price, max_price=max_price
        )
    except SweetShopError as e:
        raise click.ClickException(str(e))
    _echo_sweets(results, output_format, currency)


@cli.command()
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "json"]),
    help="Output format (default: text)",
)
def stats(output_format: str) -> None:
    """Display inventory statistics.

    Totals, average price and the sweets running low (fewer than 10 units).
    """
    shop, currency = _load_demo_shop()
    statistics = shop.statistics()

    if output_format == "json":
        data = {
            **statistics.to_dict(),
            "low_stock": [s.to_dict() for s in shop.low_stock()],
        }
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        click.echo(format_stats(statistics, shop.low_stock(), currency))


@cli.command()
def categories() -> None:
    """List the distinct sweet categories."""
    shop, _ = _load_demo_shop()
    for category in shop.categories():
        click.echo(category)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
