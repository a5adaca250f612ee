"""Test the in-memory repository."""
from dataclasses import dataclass
from patterns.repository import InMemoryRepository


@dataclass
class Item:
    id: str
    color: str


def make_repo():
    return InMemoryRepository([Item("a", "red"), Item("b", "blue"), Item("c", "red")])


def test_add_and_find():
    repo = make_repo()
    assert len(repo) == 3
    assert repo.find("b").color == "blue"
    assert repo.find("z") is None
    assert "a" in repo


def test_list_with_filters_and_pagination():
    repo = make_repo()
    items, total = repo.list(filters={"color": "red"})
    assert total == 2
    assert [i.id for i in items] == ["a", "c"]

    page, total = repo.list(page=2, limit=2)
    assert total == 3
    assert [i.id for i in page] == ["c"]


def test_delete():
    repo = make_repo()
    assert repo.delete("a")
    assert not repo.delete("a")
    assert len(repo) == 2


def test_remove_where():
    repo = make_repo()
    removed = repo.remove_where(lambda i: i.color == "red")
    assert sorted(i.id for i in removed) == ["a", "c"]
    assert [i.id for i in repo] == ["b"]


def test_custom_key_attr():
    class ByColor(InMemoryRepository[Item]):
        key_attr = "color"

    repo = ByColor([Item("a", "red"), Item("b", "red")])
    assert len(repo) == 1
    assert repo.find("red").id == "b"
