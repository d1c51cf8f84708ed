"""Turn a YouTube channel into an audio podcast.

Usage: youcast https://www.youtube.com/channel/<channel id> <podcast name> <base url> [cover url]

Audio is downloaded to audio/<podcast name>/ and the feeds are written to
<podcast name>.rss and <podcast name>.opml in the working directory.
"""

import sys
from collections.abc import Sequence
from pathlib import Path

from dynaconf.validator import ValidationError
from loguru import logger
from pydantic.dataclasses import dataclass

from youcast.handlers.podcast_feed_handler import create_podcast_feed
from youcast.interfaces.commands import SubprocessRunner
from youcast.interfaces.youtube import ChannelReference
from youcast.utils.config import config
from youcast.utils.exceptions import ArgumentError, YoucastError
from youcast.utils.global_http_client import http_client
from youcast.utils.global_logger import init_logging
from youcast.utils.monitoring import monitor_run, setup_tracing

USAGE = "Usage: {program} https://www.youtube.com/channel/<channel id> <podcast name> <base url> [cover url]"


@dataclass(frozen=True)
class Arguments:
    """Values given on the command line."""

    channel: ChannelReference
    name: str
    base_url: str
    image_url: str = ""


def parse_args(args: Sequence[str]) -> Arguments:
    """Parse the positional arguments (without the program name).

    Raises:
        ArgumentError: If an argument is missing or invalid.
    """
    if len(args) < 3:  # noqa: PLR2004
        raise ArgumentError("Missing required arguments.")

    if len(args) > 4:  # noqa: PLR2004
        raise ArgumentError("Too many arguments.")

    channel_url, name, base_url, *rest = args

    if not name or Path(name).name != name or name in {".", ".."}:
        raise ArgumentError(f"Invalid podcast name: {name!r}")

    if not base_url:
        raise ArgumentError("Base url must not be blank.")

    logger.info(f"Channel URL: {channel_url}")

    return Arguments(
        channel=ChannelReference.from_url(channel_url),
        name=name,
        base_url=base_url,
        image_url=rest[0] if rest else "",
    )


@monitor_run
def main(args: Arguments) -> None:
    """Create or refresh the podcast feed of a channel."""
    result = create_podcast_feed(
        args.channel,
        args.name,
        args.base_url,
        args.image_url,
        client=http_client,
        runner=SubprocessRunner(),
        output_dir=Path.cwd(),
    )

    if result.removed_video_ids:
        logger.info(f"Removed audio for: {', '.join(sorted(result.removed_video_ids))}")

    logger.success(f"Podcast '{args.name}' updated.")


def cli(argv: Sequence[str] | None = None) -> int:
    """Run from the command line and return the exit status."""
    program, *args = argv if argv is not None else sys.argv

    init_logging()
    setup_tracing(config)

    try:
        config.validators.validate_all()
        arguments = parse_args(args)
    except (ArgumentError, ValidationError) as e:
        print(e)
        print(USAGE.format(program=program))
        return 1

    try:
        main(arguments)
    except YoucastError as e:
        logger.error(f"Exiting due to {type(e).__name__}.")
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(cli())
