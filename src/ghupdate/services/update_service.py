from __future__ import annotations

import json
import logging

from ghupdate.config import API_HOST
from ghupdate.domain.errors import ApiError, PayloadShapeError
from ghupdate.domain.models import UpdateVerdict
from ghupdate.services.release_fetcher import Fetcher, ReleaseFetcher
from ghupdate.services.repo_url_service import normalize_repo_url
from ghupdate.services.version_service import parse_version

log = logging.getLogger(__name__)


class UpdateService:
    def __init__(self, fetcher: Fetcher | None = None, api_host: str = API_HOST):
        self.fetcher = fetcher if fetcher is not None else ReleaseFetcher()
        self.api_host = api_host

    def _extract_tag(self, body: bytes) -> str:
        try:
            data = json.loads(body)
        except ValueError as e:
            raise PayloadShapeError(f"GitHub API returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise PayloadShapeError("GitHub API returned non-object JSON")

        tag = data.get("tag_name")
        if isinstance(tag, str):
            return tag

        message = data.get("message")
        if isinstance(message, str):
            raise ApiError(message)

        raise PayloadShapeError("GitHub API returned no valid tag_name")

    def evaluate(self, repo_reference: str, local_version: str) -> UpdateVerdict:
        api_url = normalize_repo_url(repo_reference, api_host=self.api_host)
        log.debug("release_endpoint_resolved repo=%s url=%s", repo_reference, api_url)
        body = self.fetcher.fetch(api_url)
        latest = self._extract_tag(body)

        local = parse_version(local_version, side="local")
        remote = parse_version(latest, side="remote")

        verdict = UpdateVerdict(has_update=remote > local, latest_version=latest)
        log.info(
            "update_evaluated url=%s local=%s remote=%s has_update=%s",
            api_url,
            local,
            remote,
            verdict.has_update,
        )
        return verdict


def check_for_update(repo_reference: str, local_version: str, fetcher: Fetcher | None = None) -> UpdateVerdict:
    return UpdateService(fetcher).evaluate(repo_reference, local_version)
