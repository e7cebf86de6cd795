"""
Domain services - Core business logic.
Orchestrates the beer repository and the currency converter.
"""

import logging

from apps.beers.domain.exceptions import BadRequestError, MissingCollaboratorError
from apps.beers.domain.interfaces import BaseBeerRepository, BaseCurrencyConverter
from apps.beers.domain.models import Beer

logger = logging.getLogger(__name__)

DEFAULT_BOX_QUANTITY = 6


class BeerService:
    """
    Domain service for the beer catalog.

    Both collaborators are optional so the service can be used for the
    operations that don't need the missing one. Calling an operation that
    does need it raises MissingCollaboratorError.

    Errors raised by the collaborators are never caught here: the caller
    receives them exactly as the repository or converter raised them.
    """

    def __init__(
        self,
        beer_repository: BaseBeerRepository | None = None,
        currency_converter: BaseCurrencyConverter | None = None,
    ):
        self._beer_repository = beer_repository
        self._currency_converter = currency_converter

    @property
    def beer_repository(self) -> BaseBeerRepository:
        if self._beer_repository is None:
            raise MissingCollaboratorError("BeerService was built without a beer repository")
        return self._beer_repository

    @property
    def currency_converter(self) -> BaseCurrencyConverter:
        if self._currency_converter is None:
            raise MissingCollaboratorError("BeerService was built without a currency converter")
        return self._currency_converter

    def list_beers(self) -> list[Beer]:
        return self.beer_repository.list()

    def get_beer_by_id(self, beer_id: int) -> Beer:
        return self.beer_repository.get_by_id(beer_id)

    def get_box_price(self, beer_id: int, currency: str, quantity: int) -> float:
        """
        Total price of a box of beers, in the requested currency.

        Args:
            beer_id: Beer to price
            currency: Target currency code (e.g. "USD")
            quantity: Units in the box, 0 means a six-pack

        Returns:
            price per unit (converted if needed) times quantity, unrounded

        Example:
            >>> service.get_box_price(1, "COP", 10)
            25000.0
        """
        if not currency.strip():
            raise BadRequestError("currency must not be empty")

        if quantity == 0:
            quantity = DEFAULT_BOX_QUANTITY

        beer = self.get_beer_by_id(beer_id)

        if beer.currency == currency:
            return beer.price * quantity

        unit_price = self.currency_converter.convert(beer.currency, currency, beer.price)
        logger.debug(
            "Converted beer %s price %s %s to %s %s",
            beer_id, beer.price, beer.currency, unit_price, currency,
        )
        return unit_price * quantity

    def create_beer(self, beer: Beer) -> None:
        beer.validate()
        self.beer_repository.save(beer)
