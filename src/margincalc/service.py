"""Calculator orchestration service."""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Optional

from margincalc.cache import ResultCache
from margincalc.config import CalculatorConfig
from margincalc.formatting import format_result
from margincalc.models import (
    ComputedResult,
    DisplayResult,
    NormalizedInputsResponse,
    PricingRequest,
    PricingResponse,
)
from margincalc.normalizer import NormalizedInputs, RawInputs, normalize
from margincalc.pricing import PricingResult, compute_pricing
from margincalc.translations import get_translation

logger = logging.getLogger(__name__)


class PricingService:
    """Runs normalize -> compute for every input snapshot."""

    def __init__(
        self,
        config: CalculatorConfig,
        cache: Optional[ResultCache] = None,
    ) -> None:
        self.config = config
        self.cache = cache

    def normalize(self, raw: RawInputs) -> NormalizedInputs:
        """Normalize ``raw``, filling an omitted target from config."""
        if raw.target_margin_pct is None:
            raw = dataclasses.replace(
                raw, target_margin_pct=self.config.default_target_margin_pct
            )
        return normalize(raw)

    def compute(self, inputs: NormalizedInputs) -> PricingResult:
        if self.cache is not None:
            cached = self.cache.get(inputs)
            if cached is not None:
                logger.debug("result cache hit: %s", inputs)
                return cached

        result = compute_pricing(inputs)
        if self.cache is not None:
            self.cache.set(inputs, result)
        return result

    def calculate(self, raw: RawInputs) -> PricingResult:
        return self.compute(self.normalize(raw))

    def build_response(self, request: PricingRequest) -> PricingResponse:
        """Compute and render a full response for ``request``."""
        language = (request.language or self.config.default_language).strip().lower()
        translation = get_translation(language)

        inputs = self.normalize(
            RawInputs(
                list_price=request.list_price,
                unit_cost=request.unit_cost,
                discount_mode=request.discount_mode,
                discount_value=request.discount_value,
                target_margin_pct=request.target_margin_pct,
            )
        )
        result = self.compute(inputs)
        display = format_result(result, self.config.currency_symbol)

        target_price = result.price_for_target_margin
        markup = result.markup_pct
        return PricingResponse(
            language=language,
            currency_symbol=self.config.currency_symbol,
            currency_code=self.config.currency_code,
            inputs=NormalizedInputsResponse(**dataclasses.asdict(inputs)),
            result=ComputedResult(
                net_price=result.net_price,
                gross_profit_per_unit=result.gross_profit_per_unit,
                margin_pct=result.margin_pct,
                markup_pct=markup if math.isfinite(markup) else None,
                price_for_target_margin=(
                    target_price if math.isfinite(target_price) else None
                ),
            ),
            display=DisplayResult(**dataclasses.asdict(display)),
            labels=translation.result_labels.model_dump(),
        )


def build_service(
    config: CalculatorConfig,
    cache: Optional[ResultCache] = None,
) -> PricingService:
    """Create a service with the cache configured by ``config``.

    A shared ``cache`` is resized to the configured capacity and reused, so
    rebuilding the service keeps earlier results. With caching disabled no
    cache is attached.
    """
    if not config.result_cache_enabled:
        return PricingService(config=config, cache=None)

    if cache is None:
        cache = ResultCache(max_entries=config.result_cache_max_entries)
    else:
        cache.configure(max_entries=config.result_cache_max_entries)
    return PricingService(config=config, cache=cache)
