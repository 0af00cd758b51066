"""HTTP session used to download recipe catalogs."""

from typing import Any

import requests

from .retry import retry_on_connection_error

DEFAULT_USER_AGENT = "dishpilot/0.1"
DEFAULT_TIMEOUT = 30


class CatalogSession:
    """A requests session with a fixed user agent and a default timeout.

    Attributes:
        session: The underlying requests session
        user_agent: User agent string sent with every request
        timeout: Timeout applied when the caller does not pass one
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ):
        self.session = requests.Session()
        self.session.headers["User-Agent"] = user_agent
        self.session.headers["Accept"] = "application/json"
        self.user_agent = user_agent
        self.timeout = timeout
        self._get = retry_on_connection_error(max_retries, retry_delay)(self._get_once)

    def _get_once(self, url: str, **kwargs) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        response = self.session.get(url, **kwargs)
        response.raise_for_status()
        return response

    def get(self, url: str, **kwargs) -> requests.Response:
        """GET a URL, retrying transient connection errors.

        Raises:
            requests.HTTPError: If the server answers with an error status
            requests.RequestException: If the request fails after all retries
        """
        return self._get(url, **kwargs)

    def get_json(self, url: str, **kwargs) -> Any:
        """GET a URL and decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON
        """
        return self.get(url, **kwargs).json()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "CatalogSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
