from __future__ import annotations

import logging
import sys

from ghupdate.application.container import build_container
from ghupdate.cli import EXIT_ERROR, exit_code_for, parse_args, render_error, render_verdict
from ghupdate.config import CheckerSettings, get_app_paths
from ghupdate.domain.errors import UpdateCheckError
from ghupdate.logging_config import setup_logging
from ghupdate.services.release_fetcher import Fetcher

log = logging.getLogger(__name__)


def main(argv=None, fetcher: Fetcher | None = None) -> int:
    args = parse_args(argv)

    try:
        logs_dir = args.log_dir if args.log_dir is not None else get_app_paths().logs_dir
        setup_logging(logs_dir, level=logging.DEBUG if args.verbose else logging.INFO)
    except OSError as e:
        sys.stderr.write(f"Warning: file logging disabled: {e}\n")

    container = build_container(CheckerSettings(timeout=args.timeout), fetcher=fetcher)

    try:
        verdict = container.updates.evaluate(args.repo_url, args.local_version)
    except UpdateCheckError as e:
        log.error("update_check_failed repo=%s kind=%s error=%s", args.repo_url, e.kind, e)
        render_error(e, args.json, sys.stdout, sys.stderr)
        return EXIT_ERROR

    render_verdict(verdict, args.local_version, args.json, sys.stdout)
    return exit_code_for(verdict)


if __name__ == "__main__":
    raise SystemExit(main())
