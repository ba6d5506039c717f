"""Tests for the fallback model catalog."""
from __future__ import annotations

import msgspec
import pytest

from synthetic_quota.catalog import FALLBACK_MODELS
from synthetic_quota.catalog import find_fallback_model
from synthetic_quota.catalog import get_fallback_models
from synthetic_quota.models import ModelDescriptor


class TestGetFallbackModels:
    """Tests for get_fallback_models."""

    def test_not_empty(self):
        """Catalog has at least one model."""
        assert len(get_fallback_models()) > 0

    def test_contains_kimi(self):
        """Catalog includes Kimi K2.5."""
        assert any("Kimi-K2.5" in model.id for model in get_fallback_models())

    def test_entries_have_id_and_name(self):
        """Every entry has a non-empty string id and name."""
        for model in get_fallback_models():
            assert isinstance(model, ModelDescriptor)
            assert isinstance(model.id, str) and model.id
            assert isinstance(model.name, str) and model.name

    def test_unique_ids(self):
        """Ids are unique."""
        ids = [model.id for model in get_fallback_models()]
        assert len(ids) == len(set(ids))

    def test_stable_order(self):
        """Repeated calls return the same sequence in the same order."""
        assert get_fallback_models() is get_fallback_models()
        assert get_fallback_models() is FALLBACK_MODELS
        assert get_fallback_models()[0].id == "hf:moonshotai/Kimi-K2.5"

    def test_immutable(self):
        """The catalog cannot be mutated."""
        models = get_fallback_models()
        assert isinstance(models, tuple)
        with pytest.raises(AttributeError):
            models[0].name = "changed"

    def test_serializes(self):
        """Entries encode as id/name objects."""
        data = msgspec.json.decode(msgspec.json.encode(get_fallback_models()[:1]))
        assert data == [{"id": "hf:moonshotai/Kimi-K2.5", "name": "Kimi K2.5"}]


class TestFindFallbackModel:
    """Tests for find_fallback_model."""

    def test_found(self):
        """Exact id lookup returns the descriptor."""
        model = find_fallback_model("hf:zai-org/GLM-4.7")
        assert model is not None
        assert model.name == "GLM 4.7"

    def test_not_found(self):
        """Unknown ids return None."""
        assert find_fallback_model("hf:unknown/model") is None

    def test_requires_exact_match(self):
        """Substrings do not match."""
        assert find_fallback_model("Kimi-K2.5") is None
