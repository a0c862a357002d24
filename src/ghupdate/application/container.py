from __future__ import annotations

from dataclasses import dataclass

from ghupdate.config import CheckerSettings
from ghupdate.services.release_fetcher import Fetcher, ReleaseFetcher
from ghupdate.services.update_service import UpdateService


@dataclass(frozen=True)
class AppContainer:
    settings: CheckerSettings
    fetcher: Fetcher
    updates: UpdateService


def build_container(settings: CheckerSettings | None = None, fetcher: Fetcher | None = None) -> AppContainer:
    settings = settings or CheckerSettings()
    if fetcher is None:
        fetcher = ReleaseFetcher(user_agent=settings.user_agent, timeout=settings.timeout)
    updates = UpdateService(fetcher, api_host=settings.api_host)

    return AppContainer(settings=settings, fetcher=fetcher, updates=updates)
