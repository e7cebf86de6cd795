"""
Wires the domain service with its infrastructure collaborators.
"""

from django.conf import settings

from apps.beers.domain.services import BeerService
from apps.beers.infrastructure.persistence.repositories import BeerRepository
from apps.beers.infrastructure.providers.registry import get_converter_instance


def get_beer_service() -> BeerService:
    """
    Build a BeerService backed by the ORM repository and the configured converter.

    An unknown CURRENCY_CONVERTER_PROVIDER leaves the service without a converter:
    listing, fetching and creating still work, converting box prices does not.
    """
    return BeerService(
        beer_repository=BeerRepository(),
        currency_converter=get_converter_instance(settings.CURRENCY_CONVERTER_PROVIDER),
    )
