from collections.abc import Iterable
from pathlib import Path

from jinja2 import TemplateError
from loguru import logger

from youcast.models.data_models import FeedOutput, FeedSettings, ReconciledEntry, RemoteChannel
from youcast.utils.config import config
from youcast.utils.exceptions import StorageError, TemplateRenderError
from youcast.utils.templating import get_template

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"


def build_feed_output(
    channel: RemoteChannel, entries: Iterable[ReconciledEntry], settings: FeedSettings
) -> FeedOutput:
    """Keep the entries that have playable audio, in feed order."""
    return FeedOutput(
        channel=channel,
        settings=settings,
        entries=tuple(entry for entry in entries if entry.duration_seconds > 0),
    )


def render_podcast_feed(output: FeedOutput) -> str:
    """Render the RSS 2.0 podcast document."""
    return _render(
        "rss",
        channel=output.channel,
        settings=output.settings,
        entries=output.entries,
        itunes_namespace=ITUNES_NAMESPACE,
        audio_base_url=f"{output.settings.base_url}/{config.audio_folder}/{output.settings.name}",
        audio_ext=config.audio_ext,
        audio_mime_type=config.audio_mime_type,
        language=config.feed_language,
        category=config.feed_category,
        generator=config.feed_generator,
    )


def render_subscription_list(output: FeedOutput) -> str:
    """Render the OPML 1.0 document pointing at the podcast document."""
    return _render(
        "opml",
        channel=output.channel,
        podcast_url=f"{output.settings.base_url}/{output.settings.name}.{config.podcast_ext}",
    )


def write_documents(output: FeedOutput, directory: Path) -> list[Path]:
    """Render both documents and write them to the directory.

    Nothing is written unless both documents rendered.

    Raises:
        TemplateRenderError: If a document cannot be rendered.
        StorageError: If a document cannot be written.
    """
    documents = {
        directory / f"{output.settings.name}.{config.podcast_ext}": render_podcast_feed(output),
        directory / f"{output.settings.name}.{config.subscription_ext}": render_subscription_list(output),
    }

    for path, text in documents.items():
        logger.info(f"Writing {path}")
        try:
            with path.open("w", encoding="utf-8") as file:
                file.write(text)
        except OSError as e:
            raise StorageError(f"Unable to write {path}: {e}") from e

    return list(documents)


def _render(template_name: str, **values: object) -> str:
    try:
        return get_template(template_name).render(**values)
    except TemplateError as e:
        raise TemplateRenderError(f"Unable to render the {template_name} document: {e}") from e
