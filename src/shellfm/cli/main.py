from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shellfm import __version__
from shellfm.client import ShellFM
from shellfm.logging_config import configure_logging, get_logger
from shellfm.models.endpoint import DEFAULT_PORT, TcpEndpoint, UnixEndpoint, Unresolved

console = Console()


def _get_client(ctx: click.Context) -> ShellFM:
    return ctx.obj["client"]


def _run_command(ctx: click.Context, ok: bool, what: str) -> None:
    client = _get_client(ctx)
    if not ok:
        console.print(f"[red]Could not send '{what}' to shell-fm at {client.endpoint}[/red]")
        raise SystemExit(1)
    get_logger(endpoint=str(client.endpoint)).info("command delivered", command=what)


def _print_reply(ctx: click.Context, reply: str | None, what: str) -> None:
    client = _get_client(ctx)
    if reply is None:
        console.print(f"[red]No reply to '{what}' from shell-fm at {client.endpoint}[/red]")
        raise SystemExit(1)
    console.print(reply, markup=False, highlight=False)


@click.group()
@click.version_option(version=__version__, prog_name="shellfm-ctl")
@click.option("--socket", "socket_path", type=click.Path(), help="Shell.FM UNIX socket path")
@click.option("--host", help="Shell.FM TCP host")
@click.option("--port", type=click.IntRange(1, 65535), default=DEFAULT_PORT, show_default=True, help="Shell.FM TCP port")
@click.option("--rc", "rc_path", type=click.Path(), help="rc file to read when no target is given")
@click.option("--log-level", default="WARNING", show_default=True, help="Log level")
@click.pass_context
def cli(
    ctx: click.Context,
    socket_path: str | None,
    host: str | None,
    port: int,
    rc_path: str | None,
    log_level: str,
) -> None:
    """Remote control for the Shell.FM radio player."""
    if socket_path and host:
        raise click.UsageError("--socket and --host are mutually exclusive")

    configure_logging(log_level)

    if socket_path:
        target: tuple = (socket_path,)
    elif host:
        target = (host, port)
    else:
        target = ()

    ctx.ensure_object(dict)
    ctx.obj["client"] = ShellFM(*target, rc_path=Path(rc_path) if rc_path else None)


@cli.command()
@click.argument("station")
@click.pass_context
def play(ctx: click.Context, station: str) -> None:
    """Tune into STATION (a lastfm:// URI)."""
    _run_command(ctx, _get_client(ctx).play(station), "play")


@cli.command()
@click.pass_context
def love(ctx: click.Context) -> None:
    """Love the current track."""
    _run_command(ctx, _get_client(ctx).love(), "love")


@cli.command()
@click.pass_context
def ban(ctx: click.Context) -> None:
    """Ban the current track."""
    _run_command(ctx, _get_client(ctx).ban(), "ban")


@cli.command()
@click.pass_context
def skip(ctx: click.Context) -> None:
    """Skip the current track."""
    _run_command(ctx, _get_client(ctx).skip(), "skip")


@cli.command("next")
@click.pass_context
def next_track(ctx: click.Context) -> None:
    """Alias for skip."""
    _run_command(ctx, _get_client(ctx).next(), "skip")


@cli.command("quit")
@click.pass_context
def quit_player(ctx: click.Context) -> None:
    """Quit Shell.FM."""
    _run_command(ctx, _get_client(ctx).quit(), "quit")


@cli.command()
@click.pass_context
def pause(ctx: click.Context) -> None:
    """Toggle pause/continue."""
    _run_command(ctx, _get_client(ctx).pause(), "pause")


@cli.command()
@click.pass_context
def discovery(ctx: click.Context) -> None:
    """Toggle discovery mode."""
    _run_command(ctx, _get_client(ctx).discovery(), "discovery")


@cli.command()
@click.pass_context
def stop(ctx: click.Context) -> None:
    """Stop the station."""
    _run_command(ctx, _get_client(ctx).stop(), "stop")


@cli.command("tag-artist")
@click.argument("tags", nargs=-1, required=True)
@click.pass_context
def tag_artist(ctx: click.Context, tags: tuple[str, ...]) -> None:
    """Tag the current artist."""
    _run_command(ctx, _get_client(ctx).tag_artist(tags), "tag-artist")


@cli.command("tag-album")
@click.argument("tags", nargs=-1, required=True)
@click.pass_context
def tag_album(ctx: click.Context, tags: tuple[str, ...]) -> None:
    """Tag the current album."""
    _run_command(ctx, _get_client(ctx).tag_album(tags), "tag-album")


@cli.command("tag-track")
@click.argument("tags", nargs=-1, required=True)
@click.pass_context
def tag_track(ctx: click.Context, tags: tuple[str, ...]) -> None:
    """Tag the current track."""
    _run_command(ctx, _get_client(ctx).tag_track(tags), "tag-track")


@cli.command("artist-tags")
@click.pass_context
def artist_tags(ctx: click.Context) -> None:
    """Show the current artist's tags."""
    _print_reply(ctx, _get_client(ctx).artist_tags(), "artist-tags")


@cli.command("album-tags")
@click.pass_context
def album_tags(ctx: click.Context) -> None:
    """Show the current album's tags."""
    _print_reply(ctx, _get_client(ctx).album_tags(), "album-tags")


@cli.command("track-tags")
@click.pass_context
def track_tags(ctx: click.Context) -> None:
    """Show the current track's tags."""
    _print_reply(ctx, _get_client(ctx).track_tags(), "track-tags")


@cli.command()
@click.argument("format_string", metavar="FORMAT")
@click.pass_context
def info(ctx: click.Context, format_string: str) -> None:
    """Show track/station info rendered through FORMAT (see man shell-fm)."""
    _print_reply(ctx, _get_client(ctx).format(format_string), "info")


@cli.command()
@click.pass_context
def where(ctx: click.Context) -> None:
    """Show which socket commands would be sent to."""
    endpoint = _get_client(ctx).endpoint

    table = Table(title="Shell.FM endpoint", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Kind", endpoint.kind.value)
    if isinstance(endpoint, UnixEndpoint):
        table.add_row("Path", endpoint.path)
    elif isinstance(endpoint, TcpEndpoint):
        table.add_row("Host", endpoint.host)
        table.add_row("Port", str(endpoint.port))
    elif isinstance(endpoint, Unresolved):
        table.add_row("Reason", endpoint.reason.value)

    console.print(table)
    if not endpoint.resolved:
        raise SystemExit(1)
