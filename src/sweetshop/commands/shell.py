"""Shell command for the interactive inventory menu."""

import click


@click.command()
@click.option(
    "--sample-data/--no-sample-data",
    default=None,
    help="Seed the demo sweets (default: shop.seed_sample_data from config).",
)
def shell(sample_data: bool | None) -> None:
    """Start the interactive inventory menu.

    View, add, delete, search, purchase, restock, sort and update sweets,
    and display inventory statistics. Inventory lives in memory only and is
    reset when the shell exits.

    Examples:

        sweetshop shell

        sweetshop shell --no-sample-data
    """
    from sweetshop.commands._shell_impl import run_shell

    run_shell(sample_data=sample_data)
