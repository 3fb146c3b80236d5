"""CLI entry points: wce parse, wce export, wce search, wce participants, wce init, wce status."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from .config import Config
from .transcripts import ParsedTranscript

PARSE_ERROR = (
    "Could not parse WhatsApp chat. Please ensure you uploaded a valid "
    "WhatsApp chat export (.txt file)."
)

_KNOWN_ENV_VARS = frozenset({"WCE_EXPORT_DIR", "WCE_ENCODING", "WCE_SEARCH_BACKEND", "WCE_GROUP_NAME"})

_export_file = click.argument("export_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log parser details to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """WhatsApp Chat Extractor — turn chat exports into structured messages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    ctx.ensure_object(dict)
    Config().load_env_file()  # Seed os.environ before constructing final config
    ctx.obj["config"] = Config()


def _load_transcript(path: Path, config: Config) -> ParsedTranscript:
    """Read and parse an export, turning every failure into a user-facing error."""
    from .transcripts.whatsapp import parse_file

    try:
        transcript = parse_file(path, config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise click.ClickException(f"Error reading file. Please try again. ({exc})") from exc

    if transcript is None:
        raise click.ClickException(PARSE_ERROR)
    return transcript


@cli.command()
@_export_file
@click.option("--json", "as_json", is_flag=True, help="Print the full structured record as JSON")
@click.pass_context
def parse(ctx: click.Context, export_file: Path, as_json: bool) -> None:
    """Parse a chat export and print its summary."""
    from .export import to_json
    from .summary import format_summary

    config = ctx.obj["config"]
    transcript = _load_transcript(export_file, config)

    if as_json:
        click.echo(to_json(transcript, config.group_name, config.json_indent))
        return

    for line in format_summary(transcript, config.group_name):
        click.echo(line)


@cli.command()
@_export_file
@click.option("--format", "fmt", type=click.Choice(["json", "csv"]), default="json", help="Export format")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Destination file")
@click.pass_context
def export(ctx: click.Context, export_file: Path, fmt: str, output: Path | None) -> None:
    """Write the parsed chat as JSON or CSV."""
    from .export import write_export

    config = ctx.obj["config"]
    transcript = _load_transcript(export_file, config)

    destination = output or config.export_path(fmt)
    try:
        written = write_export(transcript, destination, fmt, config.group_name, config.json_indent)
    except OSError as exc:
        raise click.ClickException(f"Failed to write {destination}: {exc}") from exc

    click.echo(f"Exported {transcript.message_count} message(s) to {written}")


@cli.command()
@_export_file
@click.argument("query", default="")
@click.option("--sender", default=None, help="Only messages from this participant ('all' for everyone)")
@click.option("--backend", type=click.Choice(["substring", "bm25"]), default=None, help="Search backend (default from config)")
@click.option("--limit", "-n", type=int, default=0, help="Max results to show (0 = unlimited)")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def search(
    ctx: click.Context,
    export_file: Path,
    query: str,
    sender: str | None,
    backend: str | None,
    limit: int,
    as_json: bool,
) -> None:
    """Search messages by text or sender."""
    from .search import get_backend

    config = ctx.obj["config"]
    transcript = _load_transcript(export_file, config)

    try:
        search_backend = get_backend(backend or config.search_backend)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    search_backend.index(list(transcript.messages))
    results = search_backend.search(query, limit=limit, sender=sender)

    if as_json:
        import json as json_mod
        output = [
            {
                "rank": r.rank,
                "score": r.score,
                "timestamp": r.message.timestamp,
                "sender": r.message.sender,
                "message": r.message.message,
            }
            for r in results
        ]
        click.echo(json_mod.dumps(output, indent=2, ensure_ascii=False))
        return

    click.echo(f"Showing {len(results)} of {transcript.message_count} messages")
    for r in results:
        click.echo(f"\n--- {r.message.sender} ({r.message.timestamp}) ---")
        for line in r.message.message.splitlines():
            click.echo(f"  {line}")


@cli.command()
@_export_file
@click.pass_context
def participants(ctx: click.Context, export_file: Path) -> None:
    """List participants with their message counts."""
    from .summary import participant_counts

    config = ctx.obj["config"]
    transcript = _load_transcript(export_file, config)

    for name, count in participant_counts(transcript).items():
        click.echo(f"{name}: {count} messages")


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create the settings file."""
    config = ctx.obj["config"]

    if config.ensure_env_file():
        click.echo(f"Created {config.env_file}")
    else:
        click.echo(f"Env file: {config.env_file} (already exists)")


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the resolved configuration."""
    config = ctx.obj["config"]

    click.echo("WhatsApp Chat Extractor Status")
    click.echo("=" * 40)

    click.echo(f"\nEnv file: {config.env_file}")
    click.echo(f"  Exists: {'yes' if config.env_file.exists() else 'no (run wce init to create)'}")

    click.echo(f"\nExport dir: {config.export_dir.resolve()}")
    click.echo(f"  JSON: {config.json_export_path.name}")
    click.echo(f"  CSV: {config.csv_export_path.name}")

    click.echo(f"\nEncoding: {config.encoding}")
    click.echo(f"Search backend: {config.search_backend}")
    click.echo(f"Group name: {config.group_name or 'not set'}")

    unknown = [k for k in os.environ if k.startswith("WCE_") and k not in _KNOWN_ENV_VARS]
    if unknown:
        click.echo(f"\nWarning: unrecognized setting(s): {', '.join(sorted(unknown))}", err=True)
