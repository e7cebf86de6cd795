"""
Mock currency converter for development and tests.
Uses fixed rates so results are reproducible.
"""

import logging

from apps.beers.domain.exceptions import InternalServerError
from apps.beers.domain.interfaces import BaseCurrencyConverter
from apps.beers.infrastructure.providers.rapid_api import CONVERSION_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class MockCurrencyConverter(BaseCurrencyConverter):
    """
    Offline converter. Useful for:
    - Development without an API key
    - Tests that must not reach the network
    """

    # Units of each currency per USD (approximate real-world values)
    BASE_RATES = {
        "USD": 1.0,
        "EUR": 0.85,
        "GBP": 0.73,
        "CHF": 0.88,
        "COP": 4000.0,
        "CLP": 900.0,
        "MXN": 17.0,
    }

    def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
        source_rate = self.BASE_RATES.get(from_currency)
        target_rate = self.BASE_RATES.get(to_currency)

        if source_rate is None or target_rate is None:
            logger.error("MockCurrencyConverter: unsupported currency pair %s/%s", from_currency, to_currency)
            raise InternalServerError(CONVERSION_ERROR_MESSAGE)

        # Cross rate through USD
        return amount * (target_rate / source_rate)
