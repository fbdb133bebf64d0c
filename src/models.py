from dataclasses import dataclass


@dataclass(frozen=True)
class EpisodeRequest:
    """A request for the sources of a single episode."""

    slug: str
    episode: str

    def __post_init__(self) -> None:
        if not self.slug or " " in self.slug:
            raise ValueError(f"Invalid slug: {self.slug!r}")
        if not (self.episode.isascii() and self.episode.isdigit()) or int(self.episode) < 1:
            raise ValueError(f"Invalid episode number: {self.episode!r}")


@dataclass(frozen=True)
class RawDocument:
    """The body of a fetched page together with the URL it came from."""

    body: str
    source_url: str


@dataclass(frozen=True)
class VideoSource:
    """A single playable stream of an episode."""

    quality: str
    url: str


@dataclass
class TitleInfo:
    """Metadata shown for a title."""

    title: str
    url: str
    description: str | None = None
    image: str | None = None
    rating: str | None = None
    status: str | None = None
    studio: str | None = None
    author: str | None = None
    age_rating: str | None = None
