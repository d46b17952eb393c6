"""
Domain records for the farm intake store.

Articles and farmers are identified by name alone, schedules are plain
(article, date) pairs and inventory items carry a running quantity that is
allowed to go negative.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    """Supply article identified by name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Farmer:
    """Farmer identified by name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Schedule:
    """Delivery schedule entry; the same (article, date) may appear twice."""
    article: Article
    date: str

    def __str__(self) -> str:
        return f"{self.article.name} @ {self.date}"


@dataclass
class InventoryItem:
    """Stock level for a single article."""
    article: Article
    quantity: int = 0

    def add(self, amount: int) -> None:
        """Increase stock by amount (negative amounts decrease it)."""
        self.quantity += amount

    def subtract(self, amount: int) -> None:
        """Decrease stock by amount; no floor is enforced."""
        self.quantity -= amount

    def __str__(self) -> str:
        return f"{self.article.name}: {self.quantity}"
