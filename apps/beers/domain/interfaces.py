from abc import ABC, abstractmethod

from apps.beers.domain.models import Beer


class BaseBeerRepository(ABC):
    @abstractmethod
    def list(self) -> list[Beer]:
        pass

    @abstractmethod
    def get_by_id(self, beer_id: int) -> Beer:
        pass

    @abstractmethod
    def save(self, beer: Beer) -> None:
        pass


class BaseCurrencyConverter(ABC):
    @abstractmethod
    def convert(self, from_currency: str, to_currency: str, amount: float) -> float:
        pass
