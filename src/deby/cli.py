import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from deby.composing.control import split_extra_fields
from deby.constants import CONFIG_FILE, DEBIAN_DIR
from deby.core.errors import ConfigError
from deby.orchestration.orchestrator import FileOutcome, UpdateOrchestrator, from_config_file

console = Console()

_STYLES = {"written": "green", "skipped": "yellow", "failed": "red"}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _orchestrator(ctx: click.Context) -> UpdateOrchestrator:
    try:
        return from_config_file(config_path=ctx.obj["config"], debian_dir=ctx.obj["debian_dir"])
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _extra_fields(fields: tuple[str, ...], joined: str | None) -> list[str]:
    out = list(fields)
    if joined:
        out.extend(split_extra_fields(joined))
    return out


def _report(*outcomes: FileOutcome) -> None:
    for o in outcomes:
        style = _STYLES[o.status]
        console.print(f"[{style}]{escape(o.message)}[/]", highlight=False, soft_wrap=True)
    if any(not o.ok for o in outcomes):
        raise SystemExit(1)


changes_option = click.option(
    "-c",
    "--changes",
    multiple=True,
    required=True,
    help="Change description; repeat for several bullets",
)
field_option = click.option(
    "-f", "--field", "fields", multiple=True, help="Extra source control field 'Key: Value'; repeatable"
)
fields_option = click.option("--fields", "joined", default=None, help="Extra fields joined by ';'")


@click.group()
@click.option(
    "--config",
    type=click.Path(path_type=Path, dir_okay=False),
    default=CONFIG_FILE,
    show_default=True,
    help="Path to the JSON config file",
)
@click.option(
    "--debian-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=DEBIAN_DIR,
    show_default=True,
    help="Directory holding changelog and control",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: Path, debian_dir: Path, verbose: bool) -> None:
    """deby: keep debian/changelog and debian/control in sync with .debyrc."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debian_dir"] = debian_dir


@cli.command("update")
@click.argument("version")
@changes_option
@field_option
@fields_option
@click.pass_context
def update_cmd(
    ctx: click.Context,
    version: str,
    changes: tuple[str, ...],
    fields: tuple[str, ...],
    joined: str | None,
) -> None:
    """Add a changelog entry for VERSION and regenerate the control file."""
    result = _orchestrator(ctx).update(version, "\n".join(changes), _extra_fields(fields, joined))
    _report(*result.outcomes)


@cli.command("changelog")
@click.argument("version")
@changes_option
@click.pass_context
def changelog_cmd(ctx: click.Context, version: str, changes: tuple[str, ...]) -> None:
    """Add a changelog entry for VERSION."""
    _report(_orchestrator(ctx).update_changelog_file(version, "\n".join(changes)))


@cli.command("control")
@field_option
@fields_option
@click.pass_context
def control_cmd(ctx: click.Context, fields: tuple[str, ...], joined: str | None) -> None:
    """Regenerate the control file."""
    _report(_orchestrator(ctx).update_control_file(_extra_fields(fields, joined)))


if __name__ == "__main__":
    cli()
