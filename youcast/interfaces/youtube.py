import re

from loguru import logger
from pydantic.dataclasses import dataclass
from requests import RequestException

from youcast.utils.config import config
from youcast.utils.exceptions import ArgumentError, FetchError
from youcast.utils.global_http_client import HttpClient

CHANNEL_URL_PATTERN = re.compile(r"https://www\.youtube\.com/channel/([\w-]+)")


@dataclass(frozen=True)
class ChannelReference:
    """A YouTube channel, as given on the command line."""

    channel_id: str
    url: str

    @property
    def feed_url(self) -> str:
        """Get the URL of the channel's metadata feed."""
        return config.channel_feed_url.format(channel_id=self.channel_id)

    @staticmethod
    def from_url(url: str) -> "ChannelReference":
        """Construct a reference from a channel URL.

        Raises:
            ArgumentError: If the URL does not point to a YouTube channel.
        """
        match = CHANNEL_URL_PATTERN.search(url)
        if not match:
            raise ArgumentError(f"{url} does not contain youtube channel url")

        return ChannelReference(channel_id=match.group(1), url=url)


def fetch_channel_feed(client: HttpClient, channel: ChannelReference) -> bytes:
    """Retrieve the raw metadata feed of a channel.

    Raises:
        FetchError: On transport failure or a non-200 response.
    """
    logger.info(f"Channel XML: {channel.feed_url}")

    try:
        response = client.get(channel.feed_url, raise_for_status=False)
    except RequestException as e:
        raise FetchError(f"GET error: {e}") from e

    if response.status_code != 200:  # noqa: PLR2004
        raise FetchError(f"Status error: {response.status_code}")

    return response.content
