import functools
from datetime import datetime
from pathlib import Path

from loguru import logger

from youcast.handlers.reconciliation import reconcile
from youcast.interfaces.commands import CommandRunner
from youcast.interfaces.downloader import download_channel_audio
from youcast.interfaces.ffprobe import probe_duration
from youcast.interfaces.youtube import ChannelReference, fetch_channel_feed
from youcast.models.data_models import FeedSettings, ReconciliationResult
from youcast.parsers.channel_feed import parse_channel_feed
from youcast.serializers.feeds import build_feed_output, write_documents
from youcast.utils.config import config
from youcast.utils.global_http_client import HttpClient
from youcast.utils.helpers import format_rss_date


def create_podcast_feed(
    channel_ref: ChannelReference,
    name: str,
    base_url: str,
    image_url: str,
    *,
    client: HttpClient,
    runner: CommandRunner,
    output_dir: Path,
) -> ReconciliationResult:
    """Build the podcast and subscription documents for a channel.

    Audio is stored under `<output_dir>/<audio_folder>/<name>`,
    the documents are written to `output_dir`.
    """
    settings = FeedSettings(
        name=name,
        base_url=base_url.rstrip("/"),
        image_url=image_url,
        build_date=format_rss_date(datetime.now().astimezone()),
    )

    logger.info("Getting channel feed...")
    channel = parse_channel_feed(fetch_channel_feed(client, channel_ref))
    logger.info(f"Channel '{channel.title}' lists {len(channel.entries)} videos")

    audio_folder = output_dir / config.audio_folder / name
    download_channel_audio(channel_ref.url, audio_folder, len(channel.entries), runner)

    logger.info("Reconciling channel feed with audio files...")
    result = reconcile(
        channel,
        audio_folder,
        functools.partial(probe_duration, runner=runner),
        config.audio_ext,
    )

    output = build_feed_output(channel, result.entries, settings)
    logger.info(f"{len(output.entries)} of {len(result.entries)} videos have audio")

    write_documents(output, output_dir)

    return result
