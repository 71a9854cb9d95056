"""Client for Shell.FM's remote-control socket.

    >>> shc = ShellFM()                       # read ~/.shell-fm/shell-fm.rc
    >>> shc.play("lastfm://user/shell-monkey/personal")
    True
    >>> shc.format("%a - %t")
    'Nick Cave - Red Right Hand'

Every call opens its own connection. Failures never raise: commands report
``False`` and queries report ``None``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

import structlog

from shellfm.config.resolver import EndpointResolver
from shellfm.engine.transport import TransportError, open_connection, read_line, send_line
from shellfm.models.command import Command, Verb
from shellfm.models.endpoint import Endpoint

log = structlog.get_logger()


def _tag_list(tags: str | Iterable[str]) -> str:
    if isinstance(tags, str):
        return tags
    return ",".join(tags)


class ShellFM:
    """Remote control for a running Shell.FM instance.

    ``ShellFM()`` reads the target from the rc file on first use,
    ``ShellFM(path)`` talks to a UNIX socket and ``ShellFM(host, port)`` to a
    TCP socket. Any other number of arguments leaves the client unusable.
    """

    def __init__(self, *target: Any, rc_path: str | os.PathLike | None = None) -> None:
        self._resolver = EndpointResolver(*target, rc_path=rc_path)

    @property
    def endpoint(self) -> Endpoint:
        return self._resolver.resolve()

    def _frame(self, verb: str, arg: str | None) -> bytes | None:
        try:
            return Command(verb, arg).encode()
        except ValueError as e:
            log.warning("refusing to send command", verb=verb, error=str(e))
            return None

    def send_command(self, verb: str, arg: str | None = None) -> bool:
        """Send a command without waiting for an answer. Returns whether the write succeeded."""
        line = self._frame(verb, arg)
        if line is None:
            return False

        endpoint = self.endpoint
        try:
            with open_connection(endpoint) as sock:
                send_line(sock, line)
        except TransportError as e:
            log.warning("command failed", verb=verb, endpoint=str(endpoint), error=str(e))
            return False

        log.debug("command sent", verb=verb, endpoint=str(endpoint))
        return True

    def send_command_with_reply(self, verb: str, arg: str | None = None) -> str | None:
        """Send a command and return the single line the daemon answers with."""
        line = self._frame(verb, arg)
        if line is None:
            return None

        endpoint = self.endpoint
        try:
            with open_connection(endpoint) as sock:
                send_line(sock, line)
                raw = read_line(sock)
        except TransportError as e:
            log.warning("query failed", verb=verb, endpoint=str(endpoint), error=str(e))
            return None

        if not raw:
            log.warning("no reply from shell-fm", verb=verb, endpoint=str(endpoint))
            return None
        return raw.decode(errors="replace").rstrip("\r\n")

    def play(self, station: str) -> bool:
        """Tune into ``station`` (a ``lastfm://`` URI)."""
        return self.send_command(Verb.PLAY, station)

    def love(self) -> bool:
        return self.send_command(Verb.LOVE)

    def ban(self) -> bool:
        return self.send_command(Verb.BAN)

    def skip(self) -> bool:
        return self.send_command(Verb.SKIP)

    def next(self) -> bool:
        """Alias for :meth:`skip`."""
        return self.skip()

    def quit(self) -> bool:
        return self.send_command(Verb.QUIT)

    def pause(self) -> bool:
        """Toggle pause/continue."""
        return self.send_command(Verb.PAUSE)

    def discovery(self) -> bool:
        """Toggle discovery mode."""
        return self.send_command(Verb.DISCOVERY)

    def stop(self) -> bool:
        return self.send_command(Verb.STOP)

    def tag_artist(self, tags: str | Iterable[str]) -> bool:
        return self.send_command(Verb.TAG_ARTIST, _tag_list(tags))

    def tag_album(self, tags: str | Iterable[str]) -> bool:
        return self.send_command(Verb.TAG_ALBUM, _tag_list(tags))

    def tag_track(self, tags: str | Iterable[str]) -> bool:
        return self.send_command(Verb.TAG_TRACK, _tag_list(tags))

    def artist_tags(self) -> str | None:
        return self.send_command_with_reply(Verb.ARTIST_TAGS)

    def album_tags(self) -> str | None:
        return self.send_command_with_reply(Verb.ALBUM_TAGS)

    def track_tags(self) -> str | None:
        return self.send_command_with_reply(Verb.TRACK_TAGS)

    def format(self, spec: str) -> str | None:
        """Ask for track/station info. See ``man shell-fm`` for the format flags."""
        return self.send_command_with_reply(Verb.INFO, spec)
