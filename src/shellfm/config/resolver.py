"""Works out which socket the daemon is listening on.

An explicit target wins: one value is a UNIX socket path, two values are a
``(host, port)`` pair. With no target the rc file is consulted on first use.
Anything else can never be resolved.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any

import structlog

from shellfm.config.rc import endpoint_from_rc
from shellfm.models.endpoint import (
    Endpoint,
    TcpEndpoint,
    UnixEndpoint,
    Unresolved,
    UnresolvedReason,
)

log = structlog.get_logger()


def endpoint_from_target(target: tuple[Any, ...]) -> Endpoint | None:
    """Map an explicit target to an endpoint. Returns None when the rc file should decide."""
    if len(target) == 0:
        return None
    if len(target) == 1:
        path = target[0]
        if not isinstance(path, (str, os.PathLike)) or not os.fspath(path):
            return Unresolved(UnresolvedReason.INVALID_TARGET)
        return UnixEndpoint(path=os.fspath(path))
    if len(target) == 2:
        host, port = target
        try:
            port = int(port)
        except (TypeError, ValueError):
            return Unresolved(UnresolvedReason.INVALID_TARGET)
        if not host or not 1 <= port <= 65535:
            return Unresolved(UnresolvedReason.INVALID_TARGET)
        return TcpEndpoint(host=str(host), port=port)
    return Unresolved(UnresolvedReason.AMBIGUOUS_CONSTRUCTION)


class EndpointResolver:
    """Resolves the endpoint once, lazily, and hands out the cached result afterwards."""

    def __init__(self, *target: Any, rc_path: str | os.PathLike | None = None) -> None:
        self._rc_path = Path(rc_path) if rc_path is not None else None
        self._endpoint: Endpoint | None = endpoint_from_target(target)
        self._lock = threading.Lock()
        if isinstance(self._endpoint, Unresolved):
            log.warning("unusable shell-fm target", reason=self._endpoint.reason.value, arity=len(target))

    @property
    def is_resolved(self) -> bool:
        """True once resolution has run, whatever its outcome."""
        return self._endpoint is not None

    def resolve(self) -> Endpoint:
        endpoint = self._endpoint
        if endpoint is not None:
            return endpoint
        with self._lock:
            if self._endpoint is None:
                self._endpoint = endpoint_from_rc(self._rc_path)
                if not self._endpoint.resolved:
                    log.warning("no shell-fm endpoint configured", reason=self._endpoint.reason.value)
            return self._endpoint
