"""Display utilities for synthetic-quota.

This module provides rendering and output utilities for both terminal
(Rich-based) and JSON output modes.
"""
from __future__ import annotations

from synthetic_quota.display.json import decode_json
from synthetic_quota.display.json import encode_json
from synthetic_quota.display.json import output_json
from synthetic_quota.display.json import output_json_error
from synthetic_quota.display.json import output_json_pretty
from synthetic_quota.display.rich import render_models_table
from synthetic_quota.display.rich import render_quota_line
from synthetic_quota.display.rich import usage_style

__all__ = [
    # Rich rendering
    "render_quota_line",
    "render_models_table",
    "usage_style",
    # JSON output
    "output_json",
    "output_json_pretty",
    "output_json_error",
    "encode_json",
    "decode_json",
]
