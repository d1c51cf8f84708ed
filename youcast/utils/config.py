import importlib.resources as pkg_resources
from pathlib import Path
from typing import Any, Protocol, cast

from dynaconf import Dynaconf, Validator
from dynaconf.validator import ValidatorList

# Internal data paths
DATA_FOLDER = Path(str(pkg_resources.files("youcast").joinpath("data")))
TEMPLATES_FOLDER = DATA_FOLDER / "templates"
CONFIG_FILE = DATA_FOLDER / "config.toml"


class ConfigProto(Protocol):
    """Protocol for config object."""

    # Built-ins
    validators: ValidatorList

    def load_file(  # noqa: D102
        self,
        path: str | Path | None = None,
        env: str | None = None,
        silent: bool = True,  # noqa: FBT001, FBT002
        key: str | None = None,
        validate: Any = None,
    ) -> None: ...

    # Config variables
    local_mode: bool
    log_level: str

    # Remote feed
    channel_feed_url: str
    http_timeout: int
    user_agent: str

    # External programs
    downloader_executable: str
    downloader_format: str
    probe_executable: str

    # Storage
    audio_folder: str
    audio_ext: str
    audio_mime_type: str

    # Output documents
    podcast_ext: str
    subscription_ext: str
    feed_language: str
    feed_category: str
    feed_generator: str

    # Monitoring (only when deployed)
    sentry_dsn: str
    cronitor_api_key: str
    cronitor_job_id: str


config = Dynaconf(
    envvar_prefix="YOUCAST",
    settings_files=[CONFIG_FILE],
    load_dotenv=True,
    ignore_unknown_envvars=True,
    validators=[
        Validator("log_level", cast=lambda x: x.upper()),
        Validator("local_mode", cast=bool),
        Validator("http_timeout", cast=int),
    ],
)

config = cast("ConfigProto", config)

config.validators.register(
    *(
        Validator(key, required=True, ne="", messages={"operations": "{name} must not be blank"})
        for key in ("audio_ext", "podcast_ext", "subscription_ext", "downloader_executable", "probe_executable")
    ),
)
