"""Init command - write the default Sweet Shop configuration."""

import click


@click.command()
@click.option(
    "--local",
    is_flag=True,
    help="Also create .sweetshop/ in the current directory.",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing configuration files with the defaults.",
)
def init(local: bool, force: bool) -> None:
    """Write the default configuration.

    Creates ~/.config/sweetshop/config.yaml. With --local, also creates
    .sweetshop/config.yaml and .sweetshop/logs/ here and adds the log
    directory to .gitignore. Existing files are kept unless --force is given.
    """
    from sweetshop.commands._init_impl import run_init

    run_init(local=local, force=force)
