from pathlib import Path

from youcast.models.data_models import LocalArtifact, ReconciledEntry, RemoteChannel


def test_remote_entry_links(channel: RemoteChannel):
    entry = channel.entries[0]

    assert entry.guid == "https://www.youtube.com/v/A"
    assert entry.watch_url == "https://www.youtube.com/watch?v=A"


def test_channel_video_ids(channel: RemoteChannel):
    assert channel.video_ids == frozenset({"A", "B", "C"})


def test_reconciled_entry_without_artifact(channel: RemoteChannel):
    reconciled = ReconciledEntry(entry=channel.entries[0], published="fake_date")

    assert not reconciled.is_present
    assert reconciled.byte_length == 0
    assert reconciled.duration == "00:00:00"


def test_reconciled_entry_with_artifact(channel: RemoteChannel):
    artifact = LocalArtifact(video_id="A", path=Path("A.m4a"), byte_length=2048)

    reconciled = ReconciledEntry(
        entry=channel.entries[0], published="fake_date", artifact=artifact, duration_seconds=90000
    )

    assert reconciled.is_present
    assert reconciled.video_id == "A"
    assert reconciled.byte_length == 2048
    assert reconciled.duration == "25:00:00"
