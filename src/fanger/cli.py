"""
CLI entry point for Fanger.

Modified: 2025-11-09
"""

import logging
import sys
import click
import yaml
from pathlib import Path
from fanger import __version__
from fanger.config.settings import Settings, get_cache_dir
from fanger.core.exceptions import FangerError


logger = logging.getLogger(__name__)


def setup_logging(level: str, log_file: Path = None) -> None:
    """Send log records to a file so they never draw over the TUI."""
    if log_file is None:
        log_file = get_cache_dir() / "fanger.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_settings(config: Path) -> Settings:
    try:
        return Settings.load(config)
    except FangerError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/fanger/config.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Log level for ~/.cache/fanger/fanger.log",
)
@click.pass_context
def cli(ctx: click.Context, config: Path, log_level: str):
    """Fanger - File Ranger, a three-column terminal file manager."""
    setup_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.pass_context
def tui(ctx: click.Context, path: Path = None):
    """Launch the TUI interface (the default command)."""
    settings = load_settings(ctx.obj.get("config"))
    try:
        import asyncio
        from fanger.tui.app import run_app

        asyncio.run(run_app(path, settings=settings))
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
    except FangerError as e:
        logger.error(f"TUI error: {e}")
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("lines", nargs=-1, required=True)
@click.option(
    "--path",
    "-C",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory to run the commands in (default: current directory)",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for queued file operations",
)
@click.pass_context
def run(ctx: click.Context, lines, path: Path, timeout: float):
    """Run command lines without a screen, e.g. fanger run "mkdir build"."""
    from fanger.commands import parse_command
    from fanger.core.context import Context
    from fanger.tui.backend import HeadlessBackend

    settings = load_settings(ctx.obj.get("config"))
    try:
        context = Context.create(path or Path.cwd(), settings=settings)
    except FangerError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    backend = HeadlessBackend(echo=click.echo)
    failed = False
    for line in lines:
        try:
            command = parse_command(line)
            command.execute(context, backend)
        except FangerError as e:
            logger.error(f"{line!r}: {e}")
            click.echo(f"✗ {e}", err=True)
            failed = True
            break
        for text in context.pop_messages():
            click.echo(text)
        if context.exit:
            break

    if not context.wait_for_workers(timeout=timeout):
        click.echo("✗ Timed out waiting for file operations", err=True)
        failed = True
    for text in context.pop_messages():
        click.echo(text)

    if failed:
        sys.exit(1)


@cli.command()
def commands():
    """List available commands."""
    from fanger.commands import COMMANDS, list_commands

    for name in list_commands():
        click.echo(f"{name.ljust(24)} {COMMANDS[name].description}")


@cli.command()
@click.option(
    "--keymap",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to keymap file (default: ~/.config/fanger/keymap.yaml)",
)
def keys(keymap: Path):
    """Show key bindings."""
    from fanger.tui.keybindings import load_keymap

    try:
        click.echo(load_keymap(keymap).format_help_text())
    except FangerError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def config(ctx: click.Context):
    """Show the effective configuration."""
    settings = load_settings(ctx.obj.get("config"))
    click.echo(f"Fanger v{__version__}\n")
    click.echo(yaml.safe_dump(settings.to_dict(), sort_keys=False).rstrip())


if __name__ == "__main__":
    cli()
