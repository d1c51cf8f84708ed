from typing import cast

import feedparser
from feedparser.util import FeedParserDict
from loguru import logger

from youcast.models.data_models import RemoteChannel, RemoteEntry
from youcast.utils.exceptions import ParseError
from youcast.utils.helpers import to_rss_date


def parse_channel_feed(document: bytes | str) -> RemoteChannel:
    """Parse a YouTube channel feed into a RemoteChannel.

    The channel publication date is converted to the RSS date format.
    Entry dates are left untouched, they are normalized during reconciliation.

    Raises:
        ParseError: If the document is malformed or a required field is missing.
        DateFormatError: If the channel publication date cannot be parsed.
    """
    parsed = feedparser.parse(document)

    if parsed.get("bozo") and not isinstance(parsed.get("bozo_exception"), feedparser.CharacterEncodingOverride):
        raise ParseError(f"Malformed channel feed: {parsed.get('bozo_exception')}")

    feed = cast("FeedParserDict", parsed["feed"])

    channel_id = _get_required(feed, "yt_channelid", "channel")
    title = _get_required(feed, "title", "channel")
    published = _get_required(feed, "published", "channel")

    author_detail = cast("FeedParserDict", feed.get("author_detail", {}))

    entries = tuple(_parse_entry(cast("FeedParserDict", entry)) for entry in parsed["entries"])
    logger.debug(f"Parsed {len(entries)} entries for channel {channel_id}")

    return RemoteChannel(
        channel_id=channel_id,
        title=title,
        author_name=cast("str", author_detail.get("name", "")),
        published_at=to_rss_date(published),
        link_url=cast("str", feed.get("link", "")),
        entries=entries,
    )


def _parse_entry(entry: FeedParserDict) -> RemoteEntry:
    video_id = _get_required(entry, "yt_videoid", "entry")

    thumbnails = cast("list[FeedParserDict]", entry.get("media_thumbnail", []))
    thumbnail_url = cast("str", thumbnails[0].get("url", "")) if thumbnails else ""

    description = entry.get("summary") or entry.get("media_description") or ""

    return RemoteEntry(
        video_id=video_id,
        title=cast("str", entry.get("title", "")),
        published_at=_get_required(entry, "published", f"entry {video_id}"),
        description=cast("str", description),
        thumbnail_url=thumbnail_url,
    )


def _get_required(element: FeedParserDict, key: str, location: str) -> str:
    value = element.get(key)

    if not isinstance(value, str) or not value.strip():
        raise ParseError(f"Missing required field '{key}' in {location}")

    return value.strip()
