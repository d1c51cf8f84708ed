"""Models describing the remote channel, the local audio files and their reconciliation."""

from pathlib import Path

from pydantic.dataclasses import dataclass

from youcast.utils.helpers import format_duration

_GUID_BASE = "https://www.youtube.com/v/"
_WATCH_URL_BASE = "https://www.youtube.com/watch?v="


@dataclass(frozen=True)
class RemoteEntry:
    """A video advertised by the channel feed.

    published_at: the raw feed timestamp, normalized during reconciliation.
    """

    video_id: str
    title: str
    published_at: str
    description: str = ""
    thumbnail_url: str = ""

    @property
    def guid(self) -> str:
        """Get the permanent identifier of the episode."""
        return f"{_GUID_BASE}{self.video_id}"

    @property
    def watch_url(self) -> str:
        """Get the URL of the video page."""
        return f"{_WATCH_URL_BASE}{self.video_id}"


@dataclass(frozen=True)
class RemoteChannel:
    """The parsed channel feed.

    published_at: already in RSS date format.
    """

    channel_id: str
    title: str
    author_name: str
    published_at: str
    link_url: str
    entries: tuple[RemoteEntry, ...] = ()

    @property
    def video_ids(self) -> frozenset[str]:
        """Get the identifiers of every advertised video."""
        return frozenset(entry.video_id for entry in self.entries)


@dataclass(frozen=True)
class LocalArtifact:
    """An audio file present in the audio folder."""

    video_id: str
    path: Path
    byte_length: int


@dataclass(frozen=True)
class ReconciledEntry:
    """A remote entry joined with its audio file, if any."""

    entry: RemoteEntry
    published: str
    artifact: LocalArtifact | None = None
    duration_seconds: int = 0

    @property
    def video_id(self) -> str:
        """Get the identifier of the video."""
        return self.entry.video_id

    @property
    def is_present(self) -> bool:
        """Whether an audio file exists for the entry."""
        return self.artifact is not None

    @property
    def byte_length(self) -> int:
        """Get the size of the audio file, 0 if there is none."""
        if self.artifact is None:
            return 0

        return self.artifact.byte_length

    @property
    def duration(self) -> str:
        """Get the duration as HH:MM:SS."""
        return format_duration(self.duration_seconds)


@dataclass(frozen=True)
class ReconciliationPlan:
    """The decisions taken from the remote feed and a snapshot of the audio folder."""

    entries: tuple[ReconciledEntry, ...]
    orphans: tuple[LocalArtifact, ...]


@dataclass(frozen=True)
class ReconciliationResult:
    """The outcome of a reconciliation, once orphans have been removed."""

    entries: tuple[ReconciledEntry, ...]
    removed_video_ids: frozenset[str]


@dataclass(frozen=True)
class FeedSettings:
    """Values supplied by the caller for rendering.

    name: the podcast name, used for the output and audio paths.
    build_date: RSS date of the run.
    """

    name: str
    base_url: str
    build_date: str
    image_url: str = ""


@dataclass(frozen=True)
class FeedOutput:
    """Everything the feed templates need."""

    channel: RemoteChannel
    settings: FeedSettings
    entries: tuple[ReconciledEntry, ...]
