"""Reader for the Shell.FM rc file (``~/.shell-fm/shell-fm.rc``).

The file holds one ``key = value`` pair per line. Only ``bind``, ``port``
and ``unix`` matter for remote control; everything else is ignored.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

from shellfm.models.endpoint import (
    DEFAULT_PORT,
    Endpoint,
    TcpEndpoint,
    UnixEndpoint,
    Unresolved,
    UnresolvedReason,
)

log = structlog.get_logger()

_LINE_RE = re.compile(r"^\s*([^=\s]+)\s*=\s*(.*?)\s*$")


def default_rc_path() -> Path:
    """``$HOME/.shell-fm/shell-fm.rc``, falling back to the user's home directory."""
    home = os.environ.get("HOME") or str(Path.home())
    return Path(home) / ".shell-fm" / "shell-fm.rc"


def parse_rc(text: str) -> dict[str, str]:
    """Parse rc text into a key/value mapping. Lines that don't match are skipped."""
    config: dict[str, str] = {}
    for line in text.splitlines():
        match = _LINE_RE.match(line)
        if match:
            config[match.group(1)] = match.group(2)
    return config


def load_rc(path: Path) -> dict[str, str] | None:
    """Read and parse the rc file at ``path``. Returns None if it can't be read."""
    try:
        text = path.read_text(errors="replace")
    except OSError as e:
        log.debug("rc file unreadable", path=str(path), error=str(e))
        return None
    return parse_rc(text)


class RcConfig(BaseModel):
    """The subset of the rc file that decides where the daemon listens."""

    model_config = ConfigDict(extra="ignore")

    bind: str | None = None
    port: int = DEFAULT_PORT
    unix: str | None = None

    @field_validator("bind", "unix", mode="before")
    @classmethod
    def empty_is_absent(cls, v: Any) -> str | None:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("port", mode="before")
    @classmethod
    def port_or_default(cls, v: Any) -> int:
        if v is None or str(v).strip() == "":
            return DEFAULT_PORT
        try:
            port = int(str(v).strip())
        except ValueError:
            log.warning("invalid port in rc file, using default", port=v, default=DEFAULT_PORT)
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            log.warning("port out of range in rc file, using default", port=port, default=DEFAULT_PORT)
            return DEFAULT_PORT
        return port

    def to_endpoint(self) -> Endpoint:
        if self.bind:
            return TcpEndpoint(host=self.bind, port=self.port)
        if self.unix:
            return UnixEndpoint(path=self.unix)
        return Unresolved(UnresolvedReason.CONFIG_INCOMPLETE)


def endpoint_from_rc(path: str | os.PathLike | None = None) -> Endpoint:
    """Resolve an endpoint from the rc file. ``bind`` takes precedence over ``unix``."""
    rc_path = Path(path) if path is not None else default_rc_path()
    raw = load_rc(rc_path)
    if raw is None:
        return Unresolved(UnresolvedReason.CONFIG_UNREADABLE)
    endpoint = RcConfig.model_validate(raw).to_endpoint()
    log.debug("endpoint resolved from rc file", path=str(rc_path), endpoint=str(endpoint))
    return endpoint
