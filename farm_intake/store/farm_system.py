"""In-memory store for articles, farmers, schedules and inventory."""

from typing import Any

import structlog

from ..domain.models import Article, Farmer, InventoryItem, Schedule

logger = structlog.get_logger(__name__)


class FarmSystem:
    """
    Centralized store for all intake records.

    Articles and farmers are deduplicated by name, schedules are append-only
    and inventory keeps one item per article. Every operation is total.
    """

    def __init__(self) -> None:
        # Name-keyed for O(1) dedup; dicts keep insertion order for reporting
        self._articles: dict[str, Article] = {}
        self._farmers: dict[str, Farmer] = {}
        self._schedules: list[Schedule] = []
        self._inventory: dict[Article, InventoryItem] = {}

    @property
    def articles(self) -> list[Article]:
        return list(self._articles.values())

    @property
    def farmers(self) -> list[Farmer]:
        return list(self._farmers.values())

    @property
    def schedules(self) -> list[Schedule]:
        return list(self._schedules)

    @property
    def inventory(self) -> dict[Article, InventoryItem]:
        return dict(self._inventory)

    def add_article(self, name: str) -> Article:
        """Return the article with this name, creating it if unseen."""
        existing = self._articles.get(name)
        if existing is not None:
            return existing

        article = Article(name)
        self._articles[name] = article
        logger.debug("Article added", article=name)
        return article

    def add_farmer(self, name: str) -> Farmer:
        """Return the farmer with this name, creating it if unseen."""
        existing = self._farmers.get(name)
        if existing is not None:
            return existing

        farmer = Farmer(name)
        self._farmers[name] = farmer
        logger.debug("Farmer added", farmer=name)
        return farmer

    def add_schedule(self, article: Article, date: str) -> Schedule:
        """Append a schedule entry. Duplicate (article, date) pairs are kept."""
        schedule = Schedule(article, date)
        self._schedules.append(schedule)
        logger.debug("Schedule added", article=article.name, date=date)
        return schedule

    def add_stock(self, article: Article, quantity: int) -> InventoryItem:
        """Adjust stock for article by quantity, which may be negative."""
        item = self._inventory.get(article)
        if item is None:
            item = InventoryItem(article, 0)
            self._inventory[article] = item

        item.add(quantity)
        logger.debug(
            "Stock adjusted",
            article=article.name,
            delta=quantity,
            quantity=item.quantity
        )
        return item

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of the store contents."""
        return {
            "articles": [a.name for a in self._articles.values()],
            "farmers": [f.name for f in self._farmers.values()],
            "schedules": [
                {"article": s.article.name, "date": s.date}
                for s in self._schedules
            ],
            "inventory": {
                article.name: item.quantity
                for article, item in self._inventory.items()
            },
        }
