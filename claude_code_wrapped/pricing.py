"""Model name normalization and cost estimation for Claude Code Wrapped.

Raw model identifiers in the stats cache are free-form strings such as
"claude-opus-4-5-20251101" or "claude-3-5-haiku-20241022". MODEL_RULES maps
them to a display name and a pricing tier by substring match.

MODEL_RULES is order-sensitive: rules are tried top to bottom and the first
match wins. Versioned patterns ("opus-4-5") must come before the bare family
name ("opus") or every Opus variant would collapse into the family rule.

Prices are USD per one million tokens and change over time; MODEL_PRICING is
static configuration, not derived data.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from .models import ModelUsage

TOKENS_PER_PRICE_UNIT = 1_000_000
DEFAULT_PRICING_TIER = "default"


@dataclass(frozen=True)
class ModelPricing:
    """Cost rates for one pricing tier (USD per 1M tokens)."""

    input: float
    output: float
    cache_read: float
    cache_write: float


@dataclass(frozen=True)
class ModelRule:
    """Maps raw identifiers containing any of ``patterns`` to a display name."""

    patterns: Tuple[str, ...]
    display_name: str
    pricing_tier: str

    def matches(self, model: str) -> bool:
        lower = model.lower()
        return any(pattern in lower for pattern in self.patterns)


MODEL_PRICING: Dict[str, ModelPricing] = {
    "opus-4-5": ModelPricing(input=15, output=75, cache_read=1.5, cache_write=18.75),
    "opus-4-1": ModelPricing(input=15, output=75, cache_read=1.5, cache_write=18.75),
    "sonnet-4-5": ModelPricing(input=3, output=15, cache_read=0.3, cache_write=3.75),
    "sonnet-4-1": ModelPricing(input=3, output=15, cache_read=0.3, cache_write=3.75),
    "haiku-4-5": ModelPricing(input=0.8, output=4, cache_read=0.08, cache_write=1),
    "haiku": ModelPricing(input=0.25, output=1.25, cache_read=0.025, cache_write=0.3),
    DEFAULT_PRICING_TIER: ModelPricing(input=3, output=15, cache_read=0.3, cache_write=3.75),
}

MODEL_RULES: Tuple[ModelRule, ...] = (
    ModelRule(("opus-4-5", "opus-4.5", "opus 4.5"), "Claude Opus 4.5", "opus-4-5"),
    ModelRule(("opus-4-1", "opus-4.1", "opus 4.1"), "Claude Opus 4.1", "opus-4-1"),
    ModelRule(("sonnet-4-5", "sonnet-4.5", "sonnet 4.5"), "Claude Sonnet 4.5", "sonnet-4-5"),
    ModelRule(("sonnet-4-1", "sonnet-4.1", "sonnet 4.1"), "Claude Sonnet 4.1", "sonnet-4-1"),
    ModelRule(("haiku-4-5", "haiku-4.5", "haiku 4.5"), "Claude Haiku 4.5", "haiku-4-5"),
    ModelRule(("haiku",), "Claude Haiku", "haiku"),
    ModelRule(("sonnet",), "Claude Sonnet", "sonnet-4-5"),
    ModelRule(("opus",), "Claude Opus", "opus-4-1"),
)


def match_model_rule(model: str) -> Optional[ModelRule]:
    """Return the first rule matching a raw model identifier, or None."""
    for rule in MODEL_RULES:
        if rule.matches(model):
            return rule
    return None


def normalize_model_name(model: str) -> str:
    """Map a raw model identifier to its display name.

    Unknown identifiers are returned unchanged.

    Example:
        >>> normalize_model_name("claude-opus-4-5-20251101")
        'Claude Opus 4.5'
        >>> normalize_model_name("claude-3-opus-20240229")
        'Claude Opus'
        >>> normalize_model_name("gpt-4o")
        'gpt-4o'
    """
    rule = match_model_rule(model)
    return rule.display_name if rule else model


def get_model_pricing(model: str) -> ModelPricing:
    """Get the pricing tier for a raw model identifier."""
    rule = match_model_rule(model)
    tier = rule.pricing_tier if rule else DEFAULT_PRICING_TIER
    return MODEL_PRICING[tier]


def calculate_usage_cost(model: str, usage: ModelUsage) -> float:
    """Estimate the USD cost of one model's usage bucket.

    Example:
        >>> calculate_usage_cost("unknown-model", ModelUsage(input_tokens=1_000_000))
        3.0
    """
    pricing = get_model_pricing(model)
    return (
        usage.input_tokens / TOKENS_PER_PRICE_UNIT * pricing.input
        + usage.output_tokens / TOKENS_PER_PRICE_UNIT * pricing.output
        + usage.cache_read_input_tokens / TOKENS_PER_PRICE_UNIT * pricing.cache_read
        + usage.cache_creation_input_tokens / TOKENS_PER_PRICE_UNIT * pricing.cache_write
    )


def calculate_total_tokens(model_usage: Mapping[str, ModelUsage]) -> int:
    """Sum input and output tokens across all models (cache tokens excluded)."""
    return sum(u.input_tokens + u.output_tokens for u in model_usage.values())


def get_tokens_by_model(model_usage: Mapping[str, ModelUsage]) -> Dict[str, int]:
    """Total tokens (cache included) per display name.

    Raw identifiers that normalize to the same display name are summed.
    """
    result: Dict[str, int] = {}
    for model, usage in model_usage.items():
        name = normalize_model_name(model)
        result[name] = result.get(name, 0) + usage.total_tokens
    return result


def calculate_estimated_cost(
    model_usage: Mapping[str, ModelUsage],
) -> Tuple[float, Dict[str, float]]:
    """Estimate cost for every usage bucket.

    Returns:
        Tuple of (total_cost, cost_by_display_name)
    """
    total_cost = 0.0
    cost_by_model: Dict[str, float] = {}

    for model, usage in model_usage.items():
        name = normalize_model_name(model)
        cost = calculate_usage_cost(model, usage)
        cost_by_model[name] = cost_by_model.get(name, 0.0) + cost
        total_cost += cost

    return total_cost, cost_by_model
