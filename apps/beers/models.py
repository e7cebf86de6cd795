# Django discovers models here; they live in the persistence layer.
from apps.beers.infrastructure.persistence.models import BeerRecord  # noqa: F401
