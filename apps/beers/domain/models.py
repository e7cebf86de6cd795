"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

from dataclasses import dataclass

from apps.beers.domain.exceptions import BadRequestError


@dataclass(frozen=True)
class Beer:

    id: int
    name: str
    brewery: str
    country: str
    price: float
    currency: str

    def validate(self) -> None:
        """
        Check the fields in order and raise on the first invalid one.

        Raises:
            BadRequestError: naming the offending field and its value
        """
        if self.id == 0:
            raise BadRequestError(f"invalid Id: {self.id}")

        if not self.name.strip():
            raise BadRequestError(f"invalid Name: {self.name}")

        if not self.brewery.strip():
            raise BadRequestError(f"invalid Brewery: {self.brewery}")

        if not self.country.strip():
            raise BadRequestError(f"invalid Country: {self.country}")

        if self.price == 0:
            raise BadRequestError(f"invalid Price: {self.price:f}")

        if not self.currency.strip():
            raise BadRequestError(f"invalid Currency: {self.currency}")
