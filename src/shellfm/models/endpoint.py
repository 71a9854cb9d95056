from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

DEFAULT_PORT = 54311


class EndpointKind(StrEnum):
    UNIX = "unix"
    TCP = "tcp"
    UNRESOLVED = "unresolved"


class UnresolvedReason(StrEnum):
    CONFIG_UNREADABLE = "config-unreadable"
    CONFIG_INCOMPLETE = "config-incomplete"
    AMBIGUOUS_CONSTRUCTION = "ambiguous-construction"
    INVALID_TARGET = "invalid-target"


@dataclass(frozen=True)
class UnixEndpoint:
    """Local named socket the daemon listens on."""

    path: str

    kind: ClassVar[EndpointKind] = EndpointKind.UNIX
    resolved: ClassVar[bool] = True

    def __str__(self) -> str:
        return f"unix:{self.path}"


@dataclass(frozen=True)
class TcpEndpoint:
    """Host/port pair the daemon listens on."""

    host: str
    port: int = DEFAULT_PORT

    kind: ClassVar[EndpointKind] = EndpointKind.TCP
    resolved: ClassVar[bool] = True

    def __str__(self) -> str:
        return f"tcp:{self.host}:{self.port}"


@dataclass(frozen=True)
class Unresolved:
    """No usable target could be determined. Every command fails fast."""

    reason: UnresolvedReason

    kind: ClassVar[EndpointKind] = EndpointKind.UNRESOLVED
    resolved: ClassVar[bool] = False

    def __str__(self) -> str:
        return f"unresolved:{self.reason.value}"


Endpoint = UnixEndpoint | TcpEndpoint | Unresolved
