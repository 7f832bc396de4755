"""Base REST client over a single requests session."""

import logging
from typing import Any

import requests
from requests.exceptions import HTTPError

from orthoatlas.config.schema import ReportConfig

logger = logging.getLogger(__name__)


class RestClient:
    """
    Blocking HTTP client used for every upstream call in a report run.

    One request is in flight at a time. Each response body is read in full
    before the call returns, and non-2xx statuses raise HTTPError. Failed
    calls are not retried; the caller decides whether the run continues.
    """

    def __init__(self, timeout: int = 30):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        self.session = requests.Session()

    def _check(self, response: requests.Response, url: str) -> requests.Response:
        try:
            response.raise_for_status()
        except HTTPError as e:
            if response.status_code == 429:
                logger.warning(
                    f"Rate limited by API (429). URL: {url}. Not retrying."
                )
            raise e
        return response

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Make GET request.

        Args:
            url: Request URL
            params: Query parameters
            **kwargs: Additional arguments passed to requests

        Returns:
            Response object with its body fully read

        Raises:
            HTTPError: On non-success status
            Timeout: On timeout
            ConnectionError: On connection error
        """
        logger.debug(f"GET {url} params={params}")
        response = self.session.get(
            url,
            params=params,
            timeout=self.timeout,
            **kwargs,
        )
        return self._check(response, url)

    def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        **kwargs,
    ) -> Any:
        """
        Make GET request and return JSON response.

        Raises:
            HTTPError: On HTTP error
            JSONDecodeError: If response is not valid JSON
        """
        response = self.get(url, params=params, **kwargs)
        return response.json()

    def get_text(self, url: str, **kwargs) -> str:
        """Make GET request and return the decoded body text."""
        response = self.get(url, **kwargs)
        return response.text

    def post_json(
        self,
        url: str,
        payload: Any,
        **kwargs,
    ) -> Any:
        """
        POST a JSON body and return the JSON response.

        Args:
            url: Request URL
            payload: JSON-serializable request body
            **kwargs: Additional arguments passed to requests

        Returns:
            Parsed JSON response

        Raises:
            HTTPError: On non-success status
            JSONDecodeError: If response is not valid JSON
        """
        logger.debug(f"POST {url}")
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        headers.update(kwargs.pop("headers", {}))
        response = self.session.post(
            url,
            json=payload,
            headers=headers,
            timeout=self.timeout,
            **kwargs,
        )
        return self._check(response, url).json()

    @classmethod
    def from_config(cls, config: ReportConfig) -> "RestClient":
        """
        Create client from report configuration.

        Args:
            config: ReportConfig instance

        Returns:
            Configured RestClient instance
        """
        return cls(timeout=config.api.timeout_seconds)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
