"""Pytest configuration and shared fixtures for synthetic-quota tests."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import msgspec
import pytest

from synthetic_quota.config import settings
from synthetic_quota.quota import SubscriptionQuota


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point config at an empty temp dir and reset the singleton."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SYNTHETIC_QUOTA_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("SYNTHETIC_QUOTA_BAR_WIDTH", raising=False)
    monkeypatch.delenv("SYNTHETIC_QUOTA_NO_COLOR", raising=False)
    monkeypatch.setattr(settings, "_config", None)
    yield config_dir


@pytest.fixture
def utc_now() -> datetime:
    """Fixed UTC datetime for consistent testing."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_payload() -> dict:
    """Quota payload halfway through a 135 request window."""
    return {
        "subscription": {
            "limit": 135,
            "requests": 67.5,
            "renewsAt": "2099-01-01T00:00:00Z",
        }
    }


@pytest.fixture
def sample_payload_file(tmp_path: Path, sample_payload: dict) -> Path:
    """Quota payload written to disk."""
    path = tmp_path / "quota.json"
    path.write_bytes(msgspec.json.encode(sample_payload))
    return path


@pytest.fixture
def sample_quota() -> SubscriptionQuota:
    """Subscription quota without a renewal time."""
    return SubscriptionQuota(limit=135, requests=67.5)
