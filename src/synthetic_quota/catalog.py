"""Fallback model catalog.

Shown when the live model list cannot be fetched. Order matters: the display
layer lists the first few entries.
"""

from __future__ import annotations

from synthetic_quota.models import ModelDescriptor

FALLBACK_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(id="hf:moonshotai/Kimi-K2.5", name="Kimi K2.5"),
    ModelDescriptor(id="hf:moonshotai/Kimi-K2-Thinking", name="Kimi K2 Thinking"),
    ModelDescriptor(
        id="hf:moonshotai/Kimi-K2-Instruct-0905", name="Kimi K2 Instruct 0905"
    ),
    ModelDescriptor(id="hf:zai-org/GLM-4.7", name="GLM 4.7"),
    ModelDescriptor(id="hf:MiniMaxAI/MiniMax-M2.1", name="MiniMax M2.1"),
    ModelDescriptor(id="hf:deepseek-ai/DeepSeek-V3.2", name="DeepSeek V3.2"),
    ModelDescriptor(id="hf:deepseek-ai/DeepSeek-R1-0528", name="DeepSeek R1 0528"),
    ModelDescriptor(
        id="hf:Qwen/Qwen3-Coder-480B-A35B-Instruct",
        name="Qwen3 Coder 480B A35B Instruct",
    ),
    ModelDescriptor(
        id="hf:Qwen/Qwen3-235B-A22B-Thinking-2507",
        name="Qwen3 235B A22B Thinking 2507",
    ),
    ModelDescriptor(id="hf:openai/gpt-oss-120b", name="GPT OSS 120B"),
)


def get_fallback_models() -> tuple[ModelDescriptor, ...]:
    """Return the fallback model list."""
    return FALLBACK_MODELS


def find_fallback_model(model_id: str) -> ModelDescriptor | None:
    """Return the fallback entry with this exact id, if any."""
    for model in FALLBACK_MODELS:
        if model.id == model_id:
            return model
    return None
