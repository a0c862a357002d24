from .version_service import parse_version
from .repo_url_service import normalize_repo_url
from .release_fetcher import Fetcher, ReleaseFetcher
from .update_service import UpdateService, check_for_update

__all__ = [
    "parse_version",
    "normalize_repo_url",
    "Fetcher",
    "ReleaseFetcher",
    "UpdateService",
    "check_for_update",
]
