"""
ViewSets for the beers API v1.
Parses the request, delegates to BeerService and renders the result.
Errors raised by the service are rendered by beer_exception_handler.
"""

import logging
import re

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.beers.api.v1.serializers import (
    MAX_BEER_ID,
    MIN_BEER_ID,
    BeerSerializer,
    BoxPriceSerializer,
    ErrorSerializer,
)
from apps.beers.application.dependencies import get_beer_service
from apps.beers.application.dto import BoxPriceDTO
from apps.beers.domain.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# Plain ASCII digits only: int() alone would also take "1_0", " 5 " or "٣".
BEER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
QUANTITY_PATTERN = re.compile(r"[0-9]+")

MAX_QUANTITY = 2**64 - 1


def parse_integer(value: str, pattern: re.Pattern, lower: int, upper: int) -> int | None:
    if value is None or not pattern.fullmatch(value):
        return None
    try:
        number = int(value)
    except ValueError:
        # Past the interpreter's digit limit, so out of range anyway.
        return None
    return number if lower <= number <= upper else None


def parse_beer_id(value: str) -> int:
    beer_id = parse_integer(value, BEER_ID_PATTERN, MIN_BEER_ID, MAX_BEER_ID)
    if beer_id is None:
        logger.error("error trying to parse param beer id to int64: %r", value)
        raise BadRequestError("id should be a number")

    return beer_id


def parse_quantity(value: str) -> int:
    quantity = parse_integer(value, QUANTITY_PATTERN, 0, MAX_QUANTITY)
    if quantity is None:
        logger.error("error trying to parse param quantity to uint64: %r", value)
        raise BadRequestError("quantity should be a positive number")

    return quantity


@extend_schema(tags=['Beers'])
class BeerViewSet(viewsets.ViewSet):

    lookup_url_kwarg = 'beer_id'

    def get_service(self):
        return get_beer_service()

    @extend_schema(responses={200: BeerSerializer(many=True), 500: ErrorSerializer})
    def list(self, request):
        beers = self.get_service().list_beers()
        return Response(BeerSerializer(beers, many=True).data)

    @extend_schema(responses={200: BeerSerializer, 400: ErrorSerializer, 404: ErrorSerializer})
    def retrieve(self, request, beer_id=None):
        beer = self.get_service().get_beer_by_id(parse_beer_id(beer_id))
        return Response(BeerSerializer(beer).data)

    @extend_schema(
        request=BeerSerializer,
        responses={201: OpenApiTypes.STR, 400: ErrorSerializer, 409: ErrorSerializer},
    )
    def create(self, request):
        try:
            data = request.data
        except ParseError:
            raise BadRequestError("invalid json body")

        serializer = BeerSerializer(data=data)
        if not serializer.is_valid():
            logger.error("error trying to bind request body: %s", serializer.errors)
            raise BadRequestError("invalid json body")

        self.get_service().create_beer(serializer.to_beer())
        return Response("Beer created", status=status.HTTP_201_CREATED)

    @extend_schema(
        parameters=[
            OpenApiParameter("currency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. USD)"),
            OpenApiParameter("quantity", OpenApiTypes.INT, required=True, description="Beers in the box (0 means 6)"),
        ],
        responses={200: BoxPriceSerializer, 400: ErrorSerializer, 404: ErrorSerializer, 500: ErrorSerializer},
        description="Price of a box of beers in the requested currency"
    )
    @action(detail=True, methods=['get'], url_path='boxprice')
    def box_price(self, request, beer_id=None):
        parsed_id = parse_beer_id(beer_id)
        currency = request.query_params.get('currency', '')
        quantity = parse_quantity(request.query_params.get('quantity', ''))

        total_price = self.get_service().get_box_price(parsed_id, currency, quantity)

        return Response(BoxPriceSerializer(BoxPriceDTO(total_price=total_price)).data)
