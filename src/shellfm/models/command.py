from dataclasses import dataclass
from enum import StrEnum


class Verb(StrEnum):
    PLAY = "play"
    LOVE = "love"
    BAN = "ban"
    SKIP = "skip"
    QUIT = "quit"
    PAUSE = "pause"
    DISCOVERY = "discovery"
    STOP = "stop"
    TAG_ARTIST = "tag-artist"
    TAG_ALBUM = "tag-album"
    TAG_TRACK = "tag-track"
    ARTIST_TAGS = "artist-tags"
    ALBUM_TAGS = "album-tags"
    TRACK_TAGS = "track-tags"
    INFO = "info"


@dataclass(frozen=True)
class Command:
    """A single protocol line: a verb and an optional free-form argument."""

    verb: str
    arg: str | None = None

    def __post_init__(self) -> None:
        if not self.verb or any(c.isspace() for c in self.verb):
            raise ValueError(f"Invalid verb: {self.verb!r}")
        if self.arg is not None and ("\n" in self.arg or "\r" in self.arg):
            raise ValueError("Command argument must not contain line breaks")

    def to_line(self) -> str:
        if self.arg:
            return f"{self.verb} {self.arg}\n"
        return f"{self.verb}\n"

    def encode(self) -> bytes:
        return self.to_line().encode()
