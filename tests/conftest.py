from collections.abc import Callable, Sequence
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from youcast.interfaces.commands import CommandResult
from youcast.models.data_models import FeedSettings, RemoteChannel, RemoteEntry
from youcast.utils.config import CONFIG_FILE, config

CHANNEL_ID = "UCabcdefghijklmnopqrstuv"
CHANNEL_URL = f"https://www.youtube.com/channel/{CHANNEL_ID}"


@pytest.fixture(autouse=True, scope="session")
def clean_config() -> None:
    """Reload the packaged settings so local environment variables do not leak into tests."""
    config.load_file(CONFIG_FILE)


def _build_channel_feed(entries: Sequence[tuple[str, str]], *, channel_id: str | None = CHANNEL_ID) -> bytes:
    """Build a channel feed document listing (video id, title) entries."""
    channel_id_tag = f"<yt:channelId>{channel_id}</yt:channelId>" if channel_id else ""

    entry_tags = "".join(
        f"""
 <entry>
  <id>yt:video:{video_id}</id>
  <yt:videoId>{video_id}</yt:videoId>
  <yt:channelId>{channel_id or ""}</yt:channelId>
  <title>{title}</title>
  <link rel="alternate" href="https://www.youtube.com/watch?v={video_id}"/>
  <author><name>Fake Author</name></author>
  <published>2024-03-0{index + 1}T17:00:06+00:00</published>
  <updated>2024-03-0{index + 1}T18:00:00+00:00</updated>
  <media:group>
   <media:title>{title}</media:title>
   <media:thumbnail url="https://i1.ytimg.com/vi/{video_id}/hqdefault.jpg" width="480" height="360"/>
   <media:description>About {title}</media:description>
  </media:group>
 </entry>"""
        for index, (video_id, title) in enumerate(entries)
    )

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns:yt="http://www.youtube.com/xml/schemas/2015" xmlns:media="http://search.yahoo.com/mrss/" xmlns="http://www.w3.org/2005/Atom">
 <link rel="self" href="http://www.youtube.com/feeds/videos.xml?channel_id={channel_id}"/>
 <id>yt:channel:{channel_id}</id>
 {channel_id_tag}
 <title>Fake Channel</title>
 <link rel="alternate" href="{CHANNEL_URL}"/>
 <author>
  <name>Fake Author</name>
  <uri>{CHANNEL_URL}</uri>
 </author>
 <published>2012-11-07T09:55:40+01:00</published>{entry_tags}
</feed>
""".encode()


class _FakeProbe:
    """Return canned durations keyed by file stem and remember what was probed."""

    def __init__(self, durations: dict[str, float]) -> None:
        self.durations = durations
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> float:
        self.calls.append(path)
        return self.durations[path.stem]


def _write_audio(folder: Path, video_id: str, size: int = 10) -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / f"{video_id}.m4a"
    path.write_bytes(b"\0" * size)
    return path


# region Mocked models
@pytest.fixture(name="remote_entries")
def mock_remote_entries() -> tuple[RemoteEntry, ...]:
    return tuple(
        RemoteEntry(
            video_id=video_id,
            title=f"fake_title_{video_id}",
            published_at="2024-03-01T17:00:06+00:00",
            description=f"fake_description_{video_id}",
            thumbnail_url=f"https://i1.ytimg.com/vi/{video_id}/hqdefault.jpg",
        )
        for video_id in ("A", "B", "C")
    )


@pytest.fixture(name="channel")
def mock_channel(remote_entries: tuple[RemoteEntry, ...]) -> RemoteChannel:
    return RemoteChannel(
        channel_id=CHANNEL_ID,
        title="Fake Channel",
        author_name="Fake Author",
        published_at="Wed, 07 Nov 2012 09:55:40 +0100",
        link_url=CHANNEL_URL,
        entries=remote_entries,
    )


@pytest.fixture(name="settings")
def mock_settings() -> FeedSettings:
    return FeedSettings(
        name="fakecast",
        base_url="https://example.com/podcasts",
        build_date="Fri, 01 Mar 2024 20:00:00 +0000",
        image_url="https://example.com/cover.jpg",
    )


@pytest.fixture(name="runner")
def mock_runner() -> MagicMock:
    runner = MagicMock()
    runner.run.return_value = CommandResult(returncode=0, stdout="61.5\n")
    return runner


# endregion


# region Helpers
@pytest.fixture(name="channel_url")
def mock_channel_url() -> str:
    return CHANNEL_URL


@pytest.fixture(name="build_channel_feed")
def channel_feed_builder() -> Callable[..., bytes]:
    return _build_channel_feed


@pytest.fixture(name="write_audio")
def audio_writer() -> Callable[..., Path]:
    return _write_audio


@pytest.fixture(name="make_probe")
def probe_factory() -> Callable[[dict[str, float]], _FakeProbe]:
    return _FakeProbe


# endregion
