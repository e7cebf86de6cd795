"""
Data Transfer Objects for the application layer.
DTOs decouple internal domain models from external API contracts.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class BoxPriceDTO:
    """Result DTO for a box price request."""
    total_price: float


@dataclass
class BeerLoadResultDTO:
    """Result DTO for a bulk beer load."""
    created: List[int] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors
