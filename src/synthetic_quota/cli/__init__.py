"""CLI framework for synthetic-quota."""
from __future__ import annotations

from synthetic_quota.cli.app import ExitCode
from synthetic_quota.cli.app import app
from synthetic_quota.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
