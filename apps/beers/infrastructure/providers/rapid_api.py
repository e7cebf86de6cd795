import logging

import requests

from apps.beers.domain.exceptions import InternalServerError
from apps.beers.domain.interfaces import BaseCurrencyConverter

logger = logging.getLogger(__name__)

CONVERSION_ERROR_MESSAGE = "error trying to convert from one currency to another"


class RapidApiCurrencyConverter(BaseCurrencyConverter):
    """
    RapidAPI currency-exchange provider.
    Uses the /exchange endpoint, which answers with the bare rate as a JSON number.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
        """
        Convert an amount using the current rate from RapidAPI.

        Args:
            from_currency: Currency the amount is expressed in (e.g. COP)
            to_currency: Target currency code (e.g. USD)
            amount: Amount to convert

        Returns:
            amount multiplied by the exchange rate

        Raises:
            InternalServerError: on network errors, timeouts, non-200 answers
                or a body that is not a number
        """
        # Format: https://currency-exchange.p.rapidapi.com/exchange?from=COP&to=USD
        url = f"{self.base_url}/exchange"

        try:
            response = requests.get(
                url,
                params={"from": from_currency, "to": to_currency},
                headers={"x-rapidapi-key": self.api_key},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error("Timeout calling RapidAPI for %s/%s: %s", from_currency, to_currency, e)
            raise InternalServerError(CONVERSION_ERROR_MESSAGE) from e
        except requests.exceptions.RequestException as e:
            logger.error("Error calling RapidAPI for %s/%s: %s", from_currency, to_currency, e)
            raise InternalServerError(CONVERSION_ERROR_MESSAGE) from e

        if response.status_code != requests.codes.ok:
            logger.error(
                "RapidAPI answered %s for %s/%s", response.status_code, from_currency, to_currency
            )
            raise InternalServerError(CONVERSION_ERROR_MESSAGE)

        try:
            rate = response.json()
            if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                raise ValueError(f"expected a number, got {rate!r}")
        except ValueError as e:
            logger.error("Invalid response from RapidAPI: %s", e)
            raise InternalServerError(CONVERSION_ERROR_MESSAGE) from e

        return rate * amount
