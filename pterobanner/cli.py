import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from pterobanner import __version__
from pterobanner.banner import render_banner
from pterobanner.config import MODES, load_settings
from pterobanner.launcher import start_app, start_shell
from pterobanner.logger_setup import setup_logging
from pterobanner.sysinfo import collect_system_info

log = logging.getLogger(__name__)

err_console = Console(stderr=True)


def _show(settings):
    info = collect_system_info(settings)
    render_banner(info, settings)
    return info


def _hand_off(settings, mode):
    if mode == "shell":
        return start_shell(settings)
    if mode == "app":
        return start_app(settings)
    return 0


def _guarded(ctx, func, *args):
    """Call func; any unexpected error becomes a red fatal message and exit code 1."""
    try:
        return func(*args)
    except Exception as e:
        log.debug("fatal error", exc_info=True)
        err_console.print(f"[red]Fatal error: {escape(str(e))}[/red]", highlight=False)
        ctx.exit(1)


def _show_and_hand_off(settings, mode):
    _show(settings)
    return _hand_off(settings, mode)


def _run(ctx, mode):
    ctx.exit(_guarded(ctx, _show_and_hand_off, ctx.obj, mode))


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="pterobanner")
@click.option("--mode", type=click.Choice(MODES), default=None, help="Hand-off after the banner.")
@click.option("--no-clear", is_flag=True, help="Do not clear the screen first.")
@click.option("--timezone", "tz", default=None, help="Timezone for the current time line.")
@click.option("--app-dir", default=None, type=click.Path(file_okay=False), help="Node app directory.")
@click.option("--log-level", default="WARNING", show_default=True, help="Console log level.")
@click.pass_context
def cli(ctx, mode, no_clear, tz, app_dir, log_level):
    """Print the system information banner, then start a shell or the app."""
    settings = load_settings().override(
        mode=mode,
        timezone=tz,
        app_dir=app_dir,
        clear=False if no_clear else None,
    )
    setup_logging(log_dir=settings.log_dir, console_level=log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _run(ctx, settings.mode)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the snapshot as JSON instead.")
@click.pass_context
def info(ctx, as_json):
    """Show the banner without handing off."""
    if as_json:
        snapshot = _guarded(ctx, collect_system_info, ctx.obj)
        click.echo(json.dumps(snapshot.to_dict(), indent=2))
        return
    _guarded(ctx, _show, ctx.obj)


@cli.command()
@click.pass_context
def shell(ctx):
    """Show the banner, then start an interactive bash shell."""
    _run(ctx, "shell")


@cli.command()
@click.pass_context
def app(ctx):
    """Show the banner, then install dependencies and start the Node app."""
    _run(ctx, "app")


def main():
    cli(prog_name="pterobanner")


if __name__ == "__main__":
    sys.exit(main())
