from pathlib import Path

from loguru import logger

from youcast.models.data_models import LocalArtifact
from youcast.utils.exceptions import StorageError


def scan_local_artifacts(folder: Path, audio_ext: str) -> dict[str, LocalArtifact]:
    """Map video identifiers to the audio files found in the folder.

    Only files with the audio extension are considered, so partial downloads are ignored.
    A missing folder is created and reported as empty.

    Raises:
        StorageError: If the folder cannot be created or read.
    """
    suffix = f".{audio_ext}"

    try:
        folder.mkdir(parents=True, exist_ok=True)
        candidates = sorted(folder.iterdir())

        artifacts: dict[str, LocalArtifact] = {}
        for path in candidates:
            if path.suffix != suffix or not path.is_file():
                continue

            artifacts[path.stem] = LocalArtifact(video_id=path.stem, path=path, byte_length=path.stat().st_size)
    except OSError as e:
        raise StorageError(f"Unable to scan audio folder {folder}: {e}") from e

    logger.debug(f"Found {len(artifacts)} audio files in {folder}")

    return artifacts
