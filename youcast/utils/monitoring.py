import functools
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import cronitor
import sentry_sdk
from sentry_sdk.integrations.loguru import LoggingLevels, LoguruIntegration

from youcast.utils.config import ConfigProto, config

if TYPE_CHECKING:
    from collections.abc import Callable


P = ParamSpec("P")
R = TypeVar("R")


def setup_tracing(config: ConfigProto) -> None:
    """Set up error reporting when running deployed with a DSN configured."""
    if config.local_mode or not config.sentry_dsn:
        return

    sentry_loguru = LoguruIntegration(
        level=LoggingLevels.INFO.value,
        event_level=LoggingLevels.ERROR.value,
    )

    sentry_sdk.init(
        dsn=config.sentry_dsn,
        environment="production",
        traces_sample_rate=1.0,
        integrations=[sentry_loguru],
    )


def monitor_run(func: "Callable[P, R]") -> "Callable[P, R]":
    """Report the start and outcome of the decorated function to cronitor."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        _signal("run")

        try:
            result = func(*args, **kwargs)
        except BaseException:
            _signal("fail")
            raise
        else:
            _signal("complete")

        return result

    return wrapper


def _signal(state: str) -> None:
    if config.local_mode or not config.cronitor_job_id:
        return

    cronitor.Monitor(config.cronitor_job_id, api_key=config.cronitor_api_key).ping(state=state)
