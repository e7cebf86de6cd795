import pytest

from apps.beers.application.dependencies import get_beer_service
from apps.beers.domain.exceptions import MissingCollaboratorError
from apps.beers.infrastructure.persistence.repositories import BeerRepository
from apps.beers.infrastructure.providers.mock import MockCurrencyConverter
from apps.beers.infrastructure.providers.rapid_api import RapidApiCurrencyConverter


class TestGetBeerService:
    """Tests for get_beer_service wiring."""

    def test_default_wiring(self, settings):
        """
        Test that the service gets the ORM repository and the RapidAPI converter.
        """
        settings.CURRENCY_CONVERTER_PROVIDER = "rapid_api"

        service = get_beer_service()

        assert isinstance(service.beer_repository, BeerRepository)
        assert isinstance(service.currency_converter, RapidApiCurrencyConverter)

    def test_mock_converter(self, settings):
        """
        Test that the mock converter can be selected through settings.
        """
        settings.CURRENCY_CONVERTER_PROVIDER = "mock"

        service = get_beer_service()

        assert isinstance(service.currency_converter, MockCurrencyConverter)

    def test_unknown_converter(self, settings):
        """
        Test that an unknown converter leaves the service without one.
        """
        settings.CURRENCY_CONVERTER_PROVIDER = "nope"

        service = get_beer_service()

        with pytest.raises(MissingCollaboratorError):
            service.currency_converter
