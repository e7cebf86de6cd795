import pytest

from apps.beers.api.v1.serializers import BeerSerializer, BoxPriceSerializer
from apps.beers.application.dto import BoxPriceDTO
from apps.beers.domain.models import Beer


class TestBeerSerializer:
    """Tests for BeerSerializer."""

    def test_serialize_beer(self):
        """
        Test that BeerSerializer serializes a domain Beer with capitalised keys.
        """
        beer = Beer(id=3, name="Aguila", brewery="Bavaria", country="Colombia", price=2000.5, currency="COP")

        data = BeerSerializer(beer).data

        assert data == {
            "Id": 3,
            "Name": "Aguila",
            "Brewery": "Bavaria",
            "Country": "Colombia",
            "Price": 2000.5,
            "Currency": "COP",
        }

    def test_deserialize_to_beer(self):
        """
        Test that valid data becomes a domain Beer.
        """
        serializer = BeerSerializer(data={
            "Id": 3,
            "Name": "Aguila",
            "Brewery": "Bavaria",
            "Country": "Colombia",
            "Price": 2000,
            "Currency": "COP",
        })

        assert serializer.is_valid()
        assert serializer.to_beer() == Beer(3, "Aguila", "Bavaria", "Colombia", 2000.0, "COP")

    def test_keys_are_case_insensitive(self):
        """
        Test that lowercase and mixed case keys bind the same fields.
        """
        serializer = BeerSerializer(data={
            "id": 3,
            "NAME": "Aguila",
            "brewery": "Bavaria",
            "cOuNtRy": "Colombia",
            "price": 2000,
            "currency": "COP",
        })

        assert serializer.is_valid()
        assert serializer.to_beer() == Beer(3, "Aguila", "Bavaria", "Colombia", 2000.0, "COP")

    def test_exact_key_wins(self):
        """
        Test that the exact field name wins when two keys differ only by case.
        """
        serializer = BeerSerializer(data={"name": "lower", "Name": "Aguila"})

        assert serializer.is_valid()
        assert serializer.to_beer().name == "Aguila"

    def test_blank_and_missing_fields_are_kept(self):
        """
        Test that blank values are not trimmed or rejected here.
        """
        serializer = BeerSerializer(data={"Name": "  "})

        assert serializer.is_valid()
        assert serializer.to_beer() == Beer(0, "  ", "", "", 0.0, "")

    @pytest.mark.parametrize("field, value", [("Id", "one"), ("Price", "free"), ("Name", None)])
    def test_wrong_type(self, field, value):
        """
        Test that values of the wrong type are rejected.
        """
        serializer = BeerSerializer(data={field: value})

        assert not serializer.is_valid()
        assert field in serializer.errors

    @pytest.mark.parametrize("value", [2**63, -2**63 - 1, 2**70])
    def test_id_outside_int64(self, value):
        """
        Test that ids the beer table can't hold are rejected.
        """
        serializer = BeerSerializer(data={"Id": value})

        assert not serializer.is_valid()
        assert "Id" in serializer.errors

    @pytest.mark.parametrize("value", [2**63 - 1, -2**63])
    def test_id_int64_limits(self, value):
        """
        Test that the int64 limits themselves are accepted.
        """
        serializer = BeerSerializer(data={"Id": value})

        assert serializer.is_valid()
        assert serializer.to_beer().id == value


class TestBoxPriceSerializer:
    """Tests for BoxPriceSerializer."""

    def test_serialize_box_price(self):
        """
        Test that the float is rendered as is.
        """
        data = BoxPriceSerializer(BoxPriceDTO(total_price=3.5999999999999996)).data

        assert data == {"total_price": 3.5999999999999996}
