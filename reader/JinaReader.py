# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-23
# Updated: 2026-10-16
# Description: JinaReader
# -----------------------------------------------------------------------------
import logging
import time
from typing import Any, Dict, Optional

import requests

from config.Config import Config
from reader.types import ReadResponse
from utility.errors import InvalidInputError, InvalidResponseError
from utility.logging_utils import get_class_logger


class JinaReader:
    """
    Thin wrapper around the hosted Jina Reader API (r.jina.ai).

    Provides:
      - read_url(): POSTs a URL and returns the normalized page envelope

    Every call is a single request: no retry, no backoff. Transport errors,
    timeouts and non-2xx statuses propagate as requests exceptions.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            session: Optional[requests.Session] = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.session = session or requests.Session()
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("JinaReader initialised: %s", cfg.summary())

    @staticmethod
    def validate_url(url: str) -> None:
        if not url or not url.strip():
            raise InvalidInputError("URL cannot be empty")

        if not url.startswith(("http://", "https://")):
            raise InvalidInputError("Invalid URL, only http and https URLs are supported")

    def build_headers(self, with_all_links: bool = False) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.cfg.jina_api_key}",
            "Content-Type": "application/json",
            "X-Retain-Images": "none",
            "X-Md-Link-Style": "discarded",
        }

        if with_all_links:
            headers["X-With-Links-Summary"] = "all"

        return headers

    def read_url(self, url: str, with_all_links: bool = False) -> ReadResponse:
        """
        Read a single page through the Reader API.

        :param url: http(s) URL of the page to read
        :param with_all_links: ask the service for a summary of every link on the page
        :return: parsed response envelope
        :raises InvalidInputError: url is blank or not http(s); no request is sent
        :raises InvalidResponseError: response has no 'data' object
        """
        self.validate_url(url)

        start_time = time.time()
        try:
            resp = self.session.post(
                self.cfg.reader_endpoint,
                json={"url": url},
                headers=self.build_headers(with_all_links),
                timeout=self.cfg.reader_timeout_seconds,
            )
            resp.raise_for_status()
            body: Any = resp.json()

            if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
                raise InvalidResponseError("Invalid response data")

            result = ReadResponse.model_validate(body)

            elapsed = (time.time() - start_time) * 1000.0
            tokens = getattr(result.data.usage, "tokens", None) or 0
            self.logger.info(
                "Read: title=%r url=%s tokens=%s (%.1f ms)",
                result.data.title,
                result.data.url,
                tokens,
                elapsed,
            )
            return result

        except Exception as e:
            elapsed = (time.time() - start_time) * 1000.0
            self.logger.error("Error reading URL %s after %.1f ms: %s", url, elapsed, e)
            raise
