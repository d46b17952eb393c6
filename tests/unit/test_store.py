"""Unit tests for the in-memory farm store."""

from farm_intake.domain.models import Article, Farmer, InventoryItem, Schedule
from farm_intake.store.farm_system import FarmSystem


class TestArticles:
    """Test article deduplication."""

    def test_add_article_creates_entry(self, system: FarmSystem) -> None:
        article = system.add_article("Shiitake")

        assert article == Article("Shiitake")
        assert system.articles == [article]

    def test_add_article_returns_existing_instance(self, system: FarmSystem) -> None:
        first = system.add_article("Shiitake")
        second = system.add_article("Shiitake")

        assert second is first
        assert len(system.articles) == 1

    def test_articles_keep_insertion_order(self, system: FarmSystem) -> None:
        system.add_article("Shiitake")
        system.add_article("Oyster")
        system.add_article("Shiitake")

        assert [a.name for a in system.articles] == ["Shiitake", "Oyster"]

    def test_articles_accessor_returns_copy(self, system: FarmSystem) -> None:
        system.add_article("Shiitake")
        system.articles.append(Article("Intruder"))

        assert [a.name for a in system.articles] == ["Shiitake"]


class TestFarmers:
    """Test farmer deduplication."""

    def test_add_farmer_returns_existing_instance(self, system: FarmSystem) -> None:
        first = system.add_farmer("John")
        second = system.add_farmer("John")

        assert second is first
        assert system.farmers == [Farmer("John")]

    def test_distinct_names_are_distinct_farmers(self, system: FarmSystem) -> None:
        system.add_farmer("John")
        system.add_farmer("John-east")

        assert len(system.farmers) == 2


class TestSchedules:
    """Test append-only schedules."""

    def test_duplicate_schedules_are_kept(self, system: FarmSystem) -> None:
        article = system.add_article("Shiitake")
        system.add_schedule(article, "2023-10-26")
        system.add_schedule(article, "2023-10-26")

        assert system.schedules == [
            Schedule(article, "2023-10-26"),
            Schedule(article, "2023-10-26"),
        ]

    def test_schedule_display_form(self) -> None:
        assert str(Schedule(Article("Shiitake-HP"), "2023-10-26")) == "Shiitake-HP @ 2023-10-26"


class TestInventory:
    """Test stock adjustments."""

    def test_add_stock_creates_item_from_zero(self, system: FarmSystem) -> None:
        article = system.add_article("Shiitake")
        item = system.add_stock(article, 10)

        assert item.quantity == 10
        assert system.inventory == {article: InventoryItem(article, 10)}

    def test_add_stock_accumulates(self, system: FarmSystem) -> None:
        article = system.add_article("Shiitake")
        system.add_stock(article, 10)
        system.add_stock(article, 5)

        assert system.inventory[article].quantity == 15
        assert len(system.inventory) == 1

    def test_negative_stock_allowed(self, system: FarmSystem) -> None:
        article = system.add_article("Shiitake")
        system.add_stock(article, 3)
        system.add_stock(article, -10)

        assert system.inventory[article].quantity == -7

    def test_inventory_item_subtract(self) -> None:
        item = InventoryItem(Article("Shiitake"), 2)
        item.subtract(5)

        assert item.quantity == -3


class TestSnapshot:
    """Test plain-data snapshot."""

    def test_empty_snapshot(self, system: FarmSystem) -> None:
        assert system.snapshot() == {
            "articles": [],
            "farmers": [],
            "schedules": [],
            "inventory": {},
        }

    def test_snapshot_contents(self, system: FarmSystem) -> None:
        article = system.add_article("Shiitake-HP")
        system.add_farmer("John")
        system.add_schedule(article, "2023-10-26")
        system.add_stock(article, 10)

        assert system.snapshot() == {
            "articles": ["Shiitake-HP"],
            "farmers": ["John"],
            "schedules": [{"article": "Shiitake-HP", "date": "2023-10-26"}],
            "inventory": {"Shiitake-HP": 10},
        }
