"""Price string parsing.

The provider's model list reports prices as currency strings. Prompt and
completion prices arrive per token (``"$0.00000055"``) while flat prices are
already expressed per million tokens (``"$1.20"``). Everything is normalized
to a per-million-token float for display.
"""

from __future__ import annotations

from decimal import Decimal
from decimal import InvalidOperation

from synthetic_quota.models import ModelPricing

CURRENCY_SYMBOL = "$"
TOKENS_PER_UNIT = 1_000_000
# Positive prices below this are per-token prices.
PER_TOKEN_THRESHOLD = Decimal("0.001")


def parse_price(value: str | None) -> float:
    """Parse a currency string into a per-million-token price.

    Missing or malformed input returns 0 so that an unexpected provider
    response never breaks the quota display.
    """
    if value is None:
        return 0.0

    text = str(value).strip()
    if text.startswith(CURRENCY_SYMBOL):
        text = text[len(CURRENCY_SYMBOL) :].strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return 0.0

    if not amount.is_finite():
        return 0.0

    if 0 < amount < PER_TOKEN_THRESHOLD:
        amount *= TOKENS_PER_UNIT

    return float(amount)


def pricing_from_api(data: dict | None) -> ModelPricing:
    """Build ModelPricing from a model list ``pricing`` object.

    Accepts the ``prompt``/``completion`` keys used by the model list as well
    as ``input``/``output``.
    """
    if not data:
        return ModelPricing()

    prompt = data.get("prompt", data.get("input"))
    completion = data.get("completion", data.get("output"))
    return ModelPricing(
        input=parse_price(prompt),
        output=parse_price(completion),
    )
