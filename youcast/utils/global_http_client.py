from typing import Any

from typing_extensions import override

import requests

from youcast.utils.config import config

__all__ = ["HttpClient", "http_client"]


class HttpClient(requests.Session):
    def __init__(self):
        super().__init__()
        self.headers.update({"User-Agent": config.user_agent})

    @override
    def get(self, *args: Any, raise_for_status: bool = True, **kwargs: Any) -> requests.Response:
        return self._request("GET", *args, raise_for_status=raise_for_status, **kwargs)

    def _request(self, *args: Any, raise_for_status: bool, **kwargs: Any) -> requests.Response:
        timeout = kwargs.pop("timeout", config.http_timeout)

        response = self.request(*args, **kwargs, timeout=timeout)

        if raise_for_status:
            response.raise_for_status()

        return response


http_client = HttpClient()
