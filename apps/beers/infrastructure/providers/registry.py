"""
Converter Registry - Maps ConverterName enum to converter factories.
This is the glue between settings and the actual implementation.
"""

import logging
from typing import Callable

from django.conf import settings
from django.db import models

from apps.beers.domain.interfaces import BaseCurrencyConverter
from apps.beers.infrastructure.providers.mock import MockCurrencyConverter
from apps.beers.infrastructure.providers.rapid_api import RapidApiCurrencyConverter

logger = logging.getLogger(__name__)


class ConverterName(models.TextChoices):
    """
    Enum with available converters.
    To add a new converter:
    1. Add an entry here
    2. Implement the BaseCurrencyConverter interface
    3. Register a factory in CONVERTER_REGISTRY
    """

    RAPID_API = "rapid_api", "RapidAPI"
    MOCK = "mock", "Mock"


def build_rapid_api_converter() -> RapidApiCurrencyConverter:
    return RapidApiCurrencyConverter(
        base_url=settings.CURRENCY_CONVERTER_URL,
        api_key=settings.CURRENCY_CONVERTER_X_API_KEY,
        timeout=settings.CURRENCY_CONVERTER_TIMEOUT_MS / 1000,
    )


# Registry: Maps ConverterName enum to a factory building the converter
CONVERTER_REGISTRY: dict[str, Callable[[], BaseCurrencyConverter]] = {
    ConverterName.RAPID_API: build_rapid_api_converter,
    ConverterName.MOCK: MockCurrencyConverter,
}


def get_converter_instance(converter_name: str) -> BaseCurrencyConverter | None:
    """
    Get an instance of a converter by its name.

    Args:
        converter_name: The converter name from ConverterName enum

    Returns:
        Instance of the converter, or None if not found
    """
    factory = CONVERTER_REGISTRY.get(converter_name)

    if factory is None:
        logger.warning("Currency converter '%s' not found in registry", converter_name)
        return None

    return factory()
