"""
Repository pattern implementation.
Abstracts database access to decouple domain logic from persistence.
"""

import logging
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction

from apps.beers.domain.exceptions import ConflictError, InternalServerError, NotFoundError
from apps.beers.domain.interfaces import BaseBeerRepository
from apps.beers.domain.models import Beer
from apps.beers.infrastructure.persistence.models import BeerRecord

logger = logging.getLogger(__name__)

# The beer table stores prices as DECIMAL(10,2).
PRICE_QUANTUM = Decimal("0.01")


def to_domain(record: BeerRecord) -> Beer:
    return Beer(
        id=record.id,
        name=record.name,
        brewery=record.brewery,
        country=record.country,
        price=float(record.price),
        currency=record.currency,
    )


class BeerRepository(BaseBeerRepository):
    """Django ORM repository for the Beer aggregate."""

    def list(self) -> list[Beer]:
        """Get all beers ordered by id."""
        try:
            return [to_domain(record) for record in BeerRecord.objects.all()]
        except DatabaseError as e:
            logger.error("error trying to list beers: %s", e)
            raise InternalServerError("error trying to get beers from database") from e

    def get_by_id(self, beer_id: int) -> Beer:
        """Get a beer by id, NotFoundError if there is none."""
        try:
            record = BeerRecord.objects.get(pk=beer_id)
        except BeerRecord.DoesNotExist:
            raise NotFoundError("beer not found")
        except DatabaseError as e:
            logger.error("error trying to get beer %s: %s", beer_id, e)
            raise InternalServerError("error trying to get beer from database") from e

        return to_domain(record)

    def save(self, beer: Beer) -> None:
        """
        Insert a new beer. Existing ids are never overwritten.

        Values the beer table can't hold (price beyond DECIMAL(10,2), text
        longer than its column) are refused before the insert, so reads can
        trust whatever is stored.
        """
        try:
            record = BeerRecord(
                id=beer.id,
                name=beer.name,
                brewery=beer.brewery,
                country=beer.country,
                price=Decimal(str(beer.price)).quantize(PRICE_QUANTUM),
                currency=beer.currency,
            )
            record.full_clean(exclude=["id"], validate_unique=False)
        except (ArithmeticError, ValidationError) as e:
            logger.error("error trying to save beer %s: %s", beer.id, e)
            raise InternalServerError("error trying to save beer in database") from e

        try:
            with transaction.atomic():
                record.save(force_insert=True)
        except IntegrityError as e:
            logger.error("error trying to save beer %s: %s", beer.id, e)
            raise ConflictError(f"beer id {beer.id} already exists") from e
        except Exception as e:
            logger.exception("error trying to save beer %s: %s", beer.id, e)
            raise InternalServerError("error trying to save beer in database") from e
