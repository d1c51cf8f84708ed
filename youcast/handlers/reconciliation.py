"""Reconcile the channel feed with the audio folder.

Reconciliation runs in three steps:
    1. take a snapshot of the audio files present on disk,
    2. decide, without touching the disk, what each remote entry looks like
       and which local files no longer belong to the feed,
    3. delete those files.

Only the last step modifies storage, so the decisions can be checked on their own.
"""

from collections.abc import Callable, Mapping
from pathlib import Path

from loguru import logger

from youcast.models.data_models import (
    LocalArtifact,
    ReconciledEntry,
    ReconciliationPlan,
    ReconciliationResult,
    RemoteChannel,
    RemoteEntry,
)
from youcast.parsers.local_artifacts import scan_local_artifacts
from youcast.utils.exceptions import StorageError
from youcast.utils.helpers import duration_to_seconds, format_duration, to_rss_date

DurationProbe = Callable[[Path], float]


def reconcile(
    channel: RemoteChannel, audio_folder: Path, probe: DurationProbe, audio_ext: str
) -> ReconciliationResult:
    """Match the channel entries with the audio folder and remove stale audio files.

    Raises:
        DateFormatError: If an entry's publication date cannot be parsed.
        ProbeError: If the duration of a present audio file cannot be determined.
        StorageError: If the folder cannot be read or a stale file cannot be removed.
    """
    snapshot = scan_local_artifacts(audio_folder, audio_ext)

    plan = plan_reconciliation(channel, snapshot, probe)
    removed_video_ids = apply_pruning(plan)

    return ReconciliationResult(entries=plan.entries, removed_video_ids=removed_video_ids)


def plan_reconciliation(
    channel: RemoteChannel, snapshot: Mapping[str, LocalArtifact], probe: DurationProbe
) -> ReconciliationPlan:
    """Decide the reconciled entries and the orphaned files, in feed order."""
    entries = tuple(reconcile_entry(entry, snapshot.get(entry.video_id), probe) for entry in channel.entries)

    remote_ids = channel.video_ids
    orphans = tuple(artifact for video_id, artifact in snapshot.items() if video_id not in remote_ids)

    return ReconciliationPlan(entries=entries, orphans=orphans)


def reconcile_entry(entry: RemoteEntry, artifact: LocalArtifact | None, probe: DurationProbe) -> ReconciledEntry:
    """Join a remote entry with its audio file and measure the file's duration.

    A missing file is expected (pending or failed download) and gives a zero duration.
    """
    published = to_rss_date(entry.published_at)

    if artifact is None:
        logger.info(f"File for {entry.video_id} not found")
        return ReconciledEntry(entry=entry, published=published)

    logger.info(f"File {artifact.path} length {artifact.byte_length}")

    duration_seconds = duration_to_seconds(probe(artifact.path))
    logger.info(f"{entry.video_id} {format_duration(duration_seconds)}")

    return ReconciledEntry(
        entry=entry,
        published=published,
        artifact=artifact,
        duration_seconds=duration_seconds,
    )


def apply_pruning(plan: ReconciliationPlan) -> frozenset[str]:
    """Delete the orphaned audio files of a plan.

    Raises:
        StorageError: If a file cannot be deleted.
    """
    removed: set[str] = set()

    for artifact in plan.orphans:
        logger.info(f"Removing {artifact.path}")

        try:
            artifact.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Unable to remove {artifact.path}: {e}") from e

        removed.add(artifact.video_id)

    return frozenset(removed)
