"""Implementation of the sweetshop init command."""

from pathlib import Path

import click

from sweetshop.config import (
    ensure_global_config,
    ensure_local_config,
    get_global_config_dir,
    get_local_config_dir,
    get_setting,
    load_config,
)

GITIGNORE_SECTION = """
# Sweet Shop
.sweetshop/logs/
"""


def run_init(local: bool = False, force: bool = False) -> None:
    """Run the init command implementation.

    Args:
        local: Also set up .sweetshop/ in the current directory
        force: Overwrite existing configuration files
    """
    global_file = get_global_config_dir() / "config.yaml"
    _report(global_file, force)
    ensure_global_config(force=force)

    if local:
        project_root = Path.cwd()
        local_file = get_local_config_dir() / "config.yaml"
        _report(local_file, force)
        ensure_local_config(force=force)
        _create_log_dir(project_root)
        _update_gitignore(project_root)

    click.echo(click.style("Sweet Shop configuration ready.", fg="green"))


def _report(config_file: Path, force: bool) -> None:
    if not config_file.exists():
        click.echo(f"  Created {config_file}")
    elif force:
        click.echo(f"  Overwrote {config_file}")
    else:
        click.echo(f"  Kept existing {config_file}")


def _create_log_dir(project_root: Path) -> None:
    """Create the configured log directory when it is relative to the project."""
    log_dir = Path(get_setting(load_config(), "logging.dir", ".sweetshop/logs"))
    if not log_dir.is_absolute():
        log_dir = project_root / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    click.echo(f"  Created {log_dir}")


def _update_gitignore(project_root: Path) -> None:
    """Add the log directory to .gitignore."""
    gitignore = project_root / ".gitignore"

    if gitignore.exists():
        content = gitignore.read_text()
        if "# Sweet Shop" in content:
            click.echo("  .gitignore already contains Sweet Shop section")
            return
        with open(gitignore, "a") as f:
            f.write(GITIGNORE_SECTION)
        click.echo("  Updated .gitignore")
    else:
        with open(gitignore, "w") as f:
            f.write(GITIGNORE_SECTION.strip() + "\n")
        click.echo("  Created .gitignore")
