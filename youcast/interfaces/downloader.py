from pathlib import Path

from loguru import logger

from youcast.interfaces.commands import CommandRunner
from youcast.utils.config import config


def build_download_command(channel_url: str, audio_folder: Path, limit: int) -> list[str]:
    """Build the yt-dlp command that fetches audio for the latest `limit` videos of a channel."""
    return [
        config.downloader_executable,
        "-i",
        "--embed-thumbnail",
        "--add-metadata",
        "-f",
        config.downloader_format,
        "-o",
        f"{audio_folder}/%(id)s.{config.audio_ext}",
        "--playlist-end",
        str(limit),
        channel_url,
    ]


def download_channel_audio(channel_url: str, audio_folder: Path, limit: int, runner: CommandRunner) -> None:
    """Download the channel's audio into the folder.

    The outcome is not checked: whatever ends up in the folder is picked up by reconciliation.
    """
    if limit <= 0:
        logger.info("Channel feed lists no videos, nothing to download.")
        return

    command = build_download_command(channel_url, audio_folder, limit)

    logger.info(f"Downloading audio for up to {limit} videos...")
    try:
        result = runner.run(command, capture_output=False)
    except OSError as e:
        logger.error(f"Unable to run {command[0]}: {e}")
        return

    if not result.ok:
        logger.warning(f"{command[0]} exited with status {result.returncode}, some audio may be missing.")
