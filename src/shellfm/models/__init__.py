from shellfm.models.command import Command, Verb
from shellfm.models.endpoint import (
    Endpoint,
    EndpointKind,
    TcpEndpoint,
    UnixEndpoint,
    Unresolved,
    UnresolvedReason,
)

__all__ = [
    "Command",
    "Endpoint",
    "EndpointKind",
    "TcpEndpoint",
    "UnixEndpoint",
    "Unresolved",
    "UnresolvedReason",
    "Verb",
]
