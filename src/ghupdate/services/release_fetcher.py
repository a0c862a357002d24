from __future__ import annotations

import logging
from typing import Protocol

import requests

from ghupdate.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ghupdate.domain.errors import NetworkError

log = logging.getLogger("ghupdate.http")


class Fetcher(Protocol):
    def fetch(self, url: str) -> bytes: ...


class ReleaseFetcher:
    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float | None = DEFAULT_TIMEOUT):
        self.user_agent = user_agent
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        try:
            r = requests.get(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("release_fetch_failed url=%s error=%s", url, e)
            raise NetworkError(f"Network error: {e}") from e

        try:
            r.raise_for_status()
            body = r.content
        except requests.RequestException as e:
            log.warning("release_fetch_failed url=%s error=%s", url, e)
            raise NetworkError(f"Network error: {e}") from e
        finally:
            r.close()

        log.info("release_fetched url=%s status=%s bytes=%d", url, r.status_code, len(body))
        return body
