from __future__ import annotations

import re

from ghupdate.config import API_HOST
from ghupdate.domain.errors import ValidationError

_WEB_URL_RE = re.compile(r"https://github\.com/([^/]+)/([^/]+)")


def normalize_repo_url(reference: str, api_host: str = API_HOST) -> str:
    if api_host in reference:
        return reference

    m = _WEB_URL_RE.search(reference)
    if m is None:
        raise ValidationError(f"Invalid GitHub URL: {reference}")

    owner, repo = m.group(1), m.group(2)
    if repo.endswith(".git"):
        repo = repo[:-4]

    return f"https://{api_host}/repos/{owner}/{repo}/releases/latest"
