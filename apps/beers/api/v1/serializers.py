"""
Serializers for the beers bounded context.
Handles transformation between API payloads and domain entities.
Business validation stays in the domain: these only check types.
"""

from collections.abc import Mapping

from rest_framework import serializers

from apps.beers.domain.models import Beer

# Beer ids are stored in a signed 64 bit column.
MIN_BEER_ID = -2**63
MAX_BEER_ID = 2**63 - 1


class BeerSerializer(serializers.Serializer):
    """
    Beer wire format: capitalised keys on output (Id, Name, Brewery, Country,
    Price, Currency). Input keys are matched case-insensitively, so
    {"id": 1} and {"Id": 1} bind the same field.
    """

    # Missing fields fall back to zero values so domain validation names them.
    Id = serializers.IntegerField(source="id", default=0, min_value=MIN_BEER_ID, max_value=MAX_BEER_ID)
    Name = serializers.CharField(source="name", default="", allow_blank=True, trim_whitespace=False)
    Brewery = serializers.CharField(source="brewery", default="", allow_blank=True, trim_whitespace=False)
    Country = serializers.CharField(source="country", default="", allow_blank=True, trim_whitespace=False)
    Price = serializers.FloatField(source="price", default=0.0)
    Currency = serializers.CharField(source="currency", default="", allow_blank=True, trim_whitespace=False)

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            data = self.canonical_keys(data)
        return super().to_internal_value(data)

    def canonical_keys(self, data: Mapping) -> dict:
        # Exact key wins over a case-insensitive match of the same field.
        names = {name.lower(): name for name in self.fields}
        canonical = {}
        for key, value in data.items():
            name = names.get(key.lower(), key) if isinstance(key, str) else key
            if name not in canonical or key == name:
                canonical[name] = value
        return canonical

    def to_beer(self) -> Beer:
        return Beer(**self.validated_data)


class BoxPriceSerializer(serializers.Serializer):
    total_price = serializers.FloatField()


class ErrorSerializer(serializers.Serializer):
    message = serializers.CharField()
    status = serializers.IntegerField()
    error = serializers.CharField()
