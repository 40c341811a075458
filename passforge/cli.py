"""
PassForge CLI
==============

Click-based command-line interface for PassForge. Running ``passforge``
without a subcommand starts the interactive menu; the subcommands expose
each function directly for scripting.

Usage::

    passforge
    passforge check
    passforge generate --length 24
    passforge crack-time
    passforge banner "Hello"
    passforge --output json generate

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Callable, Optional

import click
import pyfiglet
from pydantic import BaseModel

from shared.config import ConfigError, ForgeConfig
from shared.console import ForgeConsole
from shared.logger import ForgeLogger

from passforge import __version__
from passforge.core.engine import PassForgeEngine
from passforge.core.exceptions import PassForgeError
from passforge.menu import MenuController
from passforge.output.console import PassForgeConsoleOutput
from passforge.terminal import read_secret


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group(invoke_without_command=True)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a PassForge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format for subcommands.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the title banner for subcommands.",
)
@click.version_option(__version__, prog_name="passforge")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """PassForge -- password strength, generation and crack-time toolkit.

    Without a subcommand the interactive menu is started.
    """
    ctx.ensure_object(dict)

    try:
        forge_config = ForgeConfig.load(config) if config else ForgeConfig.load()
    except ConfigError as exc:
        raise click.UsageError(f"Invalid configuration: {exc}") from exc
    tool = forge_config.passforge
    if tool.banner_font not in pyfiglet.FigletFont.getFonts():
        raise click.UsageError(f"Unknown banner font: {tool.banner_font}")

    settings = forge_config.global_settings
    logger = ForgeLogger(
        "cli",
        log_level="DEBUG" if settings.debug else settings.log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
    )
    console = ForgeConsole(
        banner_font=tool.banner_font,
        banner_width=tool.banner_width,
    )

    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output
    ctx.obj["quiet"] = quiet
    ctx.obj["logger"] = logger
    ctx.obj["console"] = console
    ctx.obj["engine"] = PassForgeEngine(forge_config)
    ctx.obj["display"] = PassForgeConsoleOutput(console)

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)
    elif output == "console" and not quiet:
        console.banner(tool.title)


def _run(ctx: click.Context, action: Callable[[], BaseModel], render: Callable) -> None:
    """Run *action*, then print its result as JSON or through *render*.

    :class:`PassForgeError` is reported and turned into exit status 1.
    """
    console: ForgeConsole = ctx.obj["console"]
    logger: ForgeLogger = ctx.obj["logger"]
    try:
        result = action()
    except PassForgeError as exc:
        logger.info("Command failed: %s", exc)
        if ctx.obj["output_format"] == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            console.error(str(exc))
        ctx.exit(1)
        return

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            result.model_dump(mode="json"),
            indent=2,
            ensure_ascii=False,
            allow_nan=False,
        ))
    else:
        render(result)


def _password_argument(password: Optional[str]) -> str:
    if password is not None:
        return password
    try:
        return read_secret("Enter your password: ")
    except EOFError:
        return ""


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Start the interactive menu."""
    engine: PassForgeEngine = ctx.obj["engine"]
    MenuController(engine, ctx.obj["console"]).run()


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def check(ctx: click.Context, password: Optional[str]) -> None:
    """Score PASSWORD against the five strength criteria.

    If PASSWORD is omitted it is read from the terminal without echo.
    """
    engine: PassForgeEngine = ctx.obj["engine"]
    display: PassForgeConsoleOutput = ctx.obj["display"]
    secret = _password_argument(password)
    _run(ctx, lambda: engine.check_strength(secret), display.display_strength)


@cli.command()
@click.option(
    "--length", "-l",
    type=int,
    default=None,
    help="Password length (default from configuration, minimum 8).",
)
@click.pass_context
def generate(ctx: click.Context, length: Optional[int]) -> None:
    """Generate a secure random password."""
    engine: PassForgeEngine = ctx.obj["engine"]
    display: PassForgeConsoleOutput = ctx.obj["display"]
    _run(ctx, lambda: engine.generate_password(length), display.display_generated)


@cli.command("crack-time")
@click.argument("password", required=False)
@click.pass_context
def crack_time(ctx: click.Context, password: Optional[str]) -> None:
    """Estimate brute-force crack time for PASSWORD.

    If PASSWORD is omitted it is read from the terminal without echo.
    """
    engine: PassForgeEngine = ctx.obj["engine"]
    display: PassForgeConsoleOutput = ctx.obj["display"]
    secret = _password_argument(password)
    _run(ctx, lambda: engine.estimate_crack_time(secret), display.display_crack_time)


@cli.command()
@click.argument("text", required=False)
@click.pass_context
def banner(ctx: click.Context, text: Optional[str]) -> None:
    """Render TEXT as an ASCII-art banner."""
    console: ForgeConsole = ctx.obj["console"]
    if not text or not text.strip():
        text = ctx.obj["config"].passforge.default_banner_text
    console.banner(text)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassForge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
