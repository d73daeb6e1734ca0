"""Card Store — tests for the in-memory ordered card collection.

Tests cover:
    - list() preserves insertion order and returns a snapshot
    - rename replaces in place, keeps all other fields, matches by id or by name
    - delete removes exactly one card; deleting twice raises instead of hitting
      an unrelated card (even one with the same name)
    - add rejects duplicate ids; get / find_by_name lookups
    - mark_used is monotonic
"""

from datetime import timedelta

import pytest

from loyalty_wallet.core.card import new_card, seed_cards
from loyalty_wallet.core.card_store import CardStore
from loyalty_wallet.core.domain_types import Symbology
from loyalty_wallet.core.errors import CardNotFoundError, CardValidationError


@pytest.fixture
def store(fixed_now) -> CardStore:
    return CardStore(seed_cards(fixed_now))


# ─── list ────────────────────────────────────────────────────────

def test_list_in_insertion_order(store):
    assert [c.name for c in store.list()] == ["Bookshop", "Cafeteria"]
    assert len(store) == 2


def test_list_is_a_snapshot(store):
    snapshot = store.list()
    store.delete(snapshot[0])
    assert len(snapshot) == 2
    assert len(store.list()) == 1


def test_empty_store():
    assert CardStore().list() == ()


def test_iteration_matches_list(store):
    assert list(store) == list(store.list())


# ─── rename ──────────────────────────────────────────────────────

def test_rename_keeps_other_fields(store):
    original = store.list()[0]
    store.rename(original, "X")
    renamed = next(c for c in store.list() if c.name == "X")
    assert renamed.payload == original.payload
    assert renamed.symbology == original.symbology
    assert renamed.created_at == original.created_at
    assert renamed.last_used_at == original.last_used_at
    assert renamed.card_id == original.card_id


def test_rename_keeps_position(store):
    cafeteria = store.list()[1]
    store.rename(cafeteria, "Coffee")
    assert [c.name for c in store.list()] == ["Bookshop", "Coffee"]


def test_rename_with_stale_reference_still_matches_by_id(store):
    original = store.list()[0]
    store.rename(original, "First")
    store.rename(original, "Second")
    assert [c.name for c in store.list()] == ["Second", "Cafeteria"]


def test_rename_by_name(store):
    updated = store.rename("Cafeteria", "Coffee")
    assert updated.name == "Coffee"
    assert store.find_by_name("Cafeteria") is None


def test_rename_missing_raises(store, fixed_now):
    stranger = new_card("Stranger", "x", Symbology.QR, fixed_now)
    with pytest.raises(CardNotFoundError):
        store.rename(stranger, "X")
    with pytest.raises(CardNotFoundError):
        store.rename("Nobody", "X")


def test_rename_to_blank_raises_and_leaves_store_unchanged(store):
    with pytest.raises(CardValidationError):
        store.rename(store.list()[0], "  ")
    assert [c.name for c in store.list()] == ["Bookshop", "Cafeteria"]


# ─── delete ──────────────────────────────────────────────────────

def test_delete_removes_exactly_one(store):
    bookshop = store.list()[0]
    removed = store.delete(bookshop)
    assert removed == bookshop
    assert len(store) == 1
    assert all(c.card_id != bookshop.card_id for c in store.list())


def test_delete_twice_raises(store):
    bookshop = store.list()[0]
    store.delete(bookshop)
    with pytest.raises(CardNotFoundError):
        store.delete(bookshop)
    assert [c.name for c in store.list()] == ["Cafeteria"]


def test_delete_twice_never_hits_a_same_named_card(fixed_now):
    first = new_card("Gym", "1", Symbology.QR, fixed_now)
    second = new_card("Gym", "2", Symbology.QR, fixed_now)
    store = CardStore([first, second])
    store.delete(first)
    with pytest.raises(CardNotFoundError):
        store.delete(first)
    assert store.list() == (second,)


def test_delete_by_name_takes_first_match(fixed_now):
    first = new_card("Gym", "1", Symbology.QR, fixed_now)
    second = new_card("Gym", "2", Symbology.QR, fixed_now)
    store = CardStore([first, second])
    assert store.delete("Gym") == first
    assert store.list() == (second,)


# ─── add / get / find_by_name ────────────────────────────────────

def test_add_appends(store, fixed_now):
    card = new_card("Pharmacy", "5901234123457", Symbology.EAN13, fixed_now)
    store.add(card)
    assert store.list()[-1] == card


def test_add_rejects_duplicate_id(store):
    with pytest.raises(CardValidationError) as exc:
        store.add(store.list()[0])
    assert exc.value.field == "card_id"
    assert len(store) == 2


def test_seeding_with_duplicate_ids_fails(fixed_now):
    card = new_card("Gym", "1", Symbology.QR, fixed_now)
    with pytest.raises(CardValidationError):
        CardStore([card, card])


def test_get_by_id(store):
    cafeteria = store.list()[1]
    assert store.get(cafeteria.card_id) == cafeteria


def test_get_missing_raises(store):
    bookshop = store.delete(store.list()[0])
    with pytest.raises(CardNotFoundError):
        store.get(bookshop.card_id)


def test_find_by_name(store):
    assert store.find_by_name("Cafeteria").payload == "1234567890128"
    assert store.find_by_name("cafeteria") is None


# ─── mark_used ───────────────────────────────────────────────────

def test_mark_used_advances_last_used(store, fixed_now):
    later = fixed_now + timedelta(hours=3)
    updated = store.mark_used(store.list()[0], later)
    assert updated.last_used_at == later
    assert store.list()[0].last_used_at == later
    assert store.list()[0].created_at == fixed_now


def test_mark_used_is_monotonic(store, fixed_now):
    updated = store.mark_used("Bookshop", fixed_now - timedelta(days=1))
    assert updated.last_used_at == fixed_now
