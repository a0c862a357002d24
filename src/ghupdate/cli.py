"""Argument parsing and output rendering for the command-line checker.

Exit status
- 0: the local version is current
- 1: usage error
- 2: a newer release is available
- 3: the check failed (bad URL, network, payload or version errors)
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ghupdate.domain.errors import UpdateCheckError
from ghupdate.domain.models import UpdateVerdict
from ghupdate.config import DEFAULT_TIMEOUT

EXIT_CURRENT = 0
EXIT_USAGE = 1
EXIT_UPDATE = 2
EXIT_ERROR = 3


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = _Parser(
        prog="gh-update-checker",
        description="Check whether a GitHub repository has a newer release than a local version.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("repo_url", help="GitHub repository URL or releases API URL")
    p.add_argument("local_version", help="Locally installed version, e.g. 1.2.3 or v1.2")
    p.add_argument("--json", action="store_true", help="Print the result as JSON")
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    p.add_argument("--log-dir", type=Path, default=None, help="Directory for log files")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    ns = p.parse_args(argv)
    if not (math.isfinite(ns.timeout) and ns.timeout > 0):
        p.error("--timeout must be a finite number > 0")
    return ns


def exit_code_for(verdict: UpdateVerdict) -> int:
    return EXIT_UPDATE if verdict.has_update else EXIT_CURRENT


def render_verdict(verdict: UpdateVerdict, local_version: str, as_json: bool, out: TextIO) -> None:
    if as_json:
        payload = {"local_version": local_version, **verdict.to_dict()}
        out.write(json.dumps(payload) + "\n")
        return
    out.write(f"Local version:  {local_version}\n")
    out.write(f"Remote version: {verdict.latest_version}\n")
    out.write(f"Update:         {'YES' if verdict.has_update else 'NO'}\n")


def render_error(exc: UpdateCheckError, as_json: bool, out: TextIO, err: TextIO) -> None:
    if as_json:
        out.write(json.dumps({"error": exc.kind, "message": str(exc)}) + "\n")
    err.write(f"Error: {exc}\n")
