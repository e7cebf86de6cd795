"""
Loads beer records in bulk, one BeerService.create_beer call per record.
"""

import logging
from typing import Iterable

from apps.beers.application.dto import BeerLoadResultDTO
from apps.beers.domain.exceptions import BeerServiceError
from apps.beers.domain.models import Beer
from apps.beers.domain.services import BeerService

logger = logging.getLogger(__name__)


def beer_from_record(record: dict) -> Beer:
    """
    Build a Beer from a plain dict. Keys are matched case-insensitively
    ("Id" or "id"). Missing or null fields get zero values so that
    validation reports them.

    Raises:
        TypeError, ValueError: if id or price are not numbers
    """
    fields = {key.lower(): value for key, value in record.items() if isinstance(key, str)}

    def text(name: str) -> str:
        value = fields.get(name)
        return "" if value is None else str(value)

    def number(name: str, cast):
        value = fields.get(name)
        return cast(0) if value is None else cast(value)

    return Beer(
        id=number("id", int),
        name=text("name"),
        brewery=text("brewery"),
        country=text("country"),
        price=number("price", float),
        currency=text("currency"),
    )


def load_beers(service: BeerService, records: Iterable[dict]) -> BeerLoadResultDTO:
    """
    Create every record that passes validation.

    A rejected record doesn't stop the load and nothing is rolled back:
    each beer is created on its own.

    Returns:
        BeerLoadResultDTO with created ids and one message per rejected record
    """
    result = BeerLoadResultDTO()

    for position, record in enumerate(records):
        try:
            beer = beer_from_record(record)
        except (TypeError, ValueError, AttributeError) as e:
            result.errors.append(f"record {position}: {e}")
            continue

        try:
            service.create_beer(beer)
        except BeerServiceError as e:
            logger.warning("Beer %s rejected: %s", beer.id, e.message)
            result.errors.append(f"record {position}: {e.message}")
            continue

        result.created.append(beer.id)

    logger.info("Loaded %s beers, %s rejected", len(result.created), len(result.errors))
    return result
