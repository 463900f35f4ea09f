"""Abstract repository for PriceList aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.price_list import PriceList


class PriceListRepository(ABC):

    @abstractmethod
    def get_by_id(self, list_id: str) -> PriceList | None:
        """Return a price list by its ID, or None if not found."""

    @abstractmethod
    def list_by_company(self, company_id: str) -> list[PriceList]:
        """Return every price list owned by a company."""

    @abstractmethod
    def save(self, price_list: PriceList) -> None:
        """Persist a new or updated price list."""

    @abstractmethod
    def delete(self, list_id: str) -> None:
        """Remove a price list together with its items."""
