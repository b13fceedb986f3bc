"""CLI adapter for ``guild_logger`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let shell scripts and operators emit entries through the same pipeline as
applications, and inspect the environment-derived configuration.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_emit` – emits one log entry.
* :func:`cli_options` – prints the effective options as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from .adapters.correlation.context import StaticCorrelator
from .adapters.env.default import coerce
from .config import options_from_env
from .core import GuildLogger
from .domain.entry import LogLevel

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

LEVEL_CHOICES: Final[tuple[str, ...]] = tuple(level.value for level in LogLevel)


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("guild_logger")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Fail-safe structured logging façade",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="guild_logger",
    message="guild_logger version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command storing the traceback preference for ``lib_cli_exit_tools``.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("guild_logger")
    except metadata.PackageNotFoundError:
        click.echo("guild_logger (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'guild_logger')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("level", type=click.Choice(LEVEL_CHOICES, case_sensitive=False))
@click.argument("message")
@click.option(
    "--meta",
    "meta_pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Metadata field attached to the entry (repeatable)",
)
@click.option("--json/--no-json", "json_output", default=False, help="Structured JSON instead of plain text")
@click.option("--pretty/--no-pretty", default=False, help="Indent JSON or colour the level token")
@click.option(
    "--threshold",
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Minimum level written (defaults to GUILD_LOGGER_LEVEL or info)",
)
@click.option("--correlation-id", default=None, help="Correlation identifier for the entry")
@click.pass_context
def cli_emit(
    ctx: click.Context,
    level: str,
    message: str,
    meta_pairs: Sequence[str],
    json_output: bool,
    pretty: bool,
    threshold: Optional[str],
    correlation_id: Optional[str],
) -> None:
    """Emit one entry through the logging pipeline.

    Defaults come from ``GUILD_LOGGER_*`` environment variables; flags override
    them. Meta values are coerced like environment values (``42`` becomes an int).
    """

    options = options_from_env(correlator=StaticCorrelator(correlation_id)).with_overrides(
        json=_explicit(ctx, "json_output", json_output),
        pretty=_explicit(ctx, "pretty", pretty),
        level=threshold,
    )
    GuildLogger(options).log(level, message, _parse_meta(meta_pairs))


def _explicit(ctx: click.Context, name: str, value: bool) -> Optional[bool]:
    """Return ``value`` only when the flag was given on the command line."""

    if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE:
        return value
    return None


@cli.command("options", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--indent", type=int, default=None, help="Pretty-print JSON output with the provided indent size")
def cli_options(indent: Optional[int]) -> None:
    """Print the options derived from ``GUILD_LOGGER_*`` environment variables."""

    click.echo(json.dumps(options_from_env().describe(), indent=indent))


def _parse_meta(pairs: Sequence[str]) -> dict[str, object]:
    """Turn ``KEY=VALUE`` pairs into metadata, preserving order."""

    meta: dict[str, object] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {pair!r}", param_hint="--meta")
        meta[key] = coerce(value)
    return meta


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="guild_logger",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
