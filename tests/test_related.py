from datetime import date

import pytest

from jsonapi_related.models import Author, Book, Store
from jsonapi_related.relationships import Many, Maybe, One, Related, RelatedState, To
from jsonapi_related.schemas.resource import Head, Pointer


def make_store(id_: str = "1") -> Store:
    return Store(head=Head(id=id_, type="stores"), name="corner", books=To.unknown(Many[Book]))


def pointers(*ids: str) -> list[Pointer]:
    return [Pointer(id=id_, type="books") for id_ in ids]


def test_unfetched_accessors() -> None:
    field = To.unfetched(Many[Book], pointers("1", "2"))

    assert field.state is RelatedState.UNFETCHED
    assert field.is_unfetched
    assert field.as_unfetched == tuple(pointers("1", "2"))
    assert field.as_fetched is None


def test_fetched_accessors() -> None:
    stores = (make_store("1"), make_store("2"))
    field = To.fetched(Many[Store], stores)

    assert field.is_fetched
    assert field.as_fetched == stores
    assert field.as_unfetched is None


def test_unknown_accessors() -> None:
    field = To.unknown(One[Author])

    assert field.is_unknown
    assert field.as_unfetched is None
    assert field.as_fetched is None


def test_from_related_keeps_state_verbatim() -> None:
    related = Related.unfetched(One[Author], Pointer(id="3", type="authors"))

    assert To(related).data is related
    assert To(Related.unknown(One[Author])).is_unknown


def test_many_pointer_shape_is_normalized_to_tuple() -> None:
    related = Related.unfetched(Many[Book], pointers("1"))

    assert isinstance(related.value, tuple)


def test_many_rejects_single_pointer() -> None:
    with pytest.raises(ValueError):
        Related.unfetched(Many[Book], Pointer(id="1", type="books"))


def test_one_rejects_pointer_sequence_and_none() -> None:
    with pytest.raises(ValueError):
        Related.unfetched(One[Author], pointers("1"))
    with pytest.raises(ValueError):
        Related.unfetched(One[Author], None)


def test_maybe_accepts_none_in_both_shapes() -> None:
    unfetched = To.unfetched(Maybe[Author], None)
    fetched = To.fetched(Maybe[Author], None)

    assert unfetched.is_unfetched and unfetched.as_unfetched is None
    assert fetched.is_fetched and fetched.as_fetched is None


def test_fetched_elements_are_type_checked() -> None:
    with pytest.raises(ValueError):
        To.fetched(Many[Book], [make_store()])
    with pytest.raises(ValueError):
        To.fetched(One[Store], None)


def test_forward_reference_elements_are_not_checked() -> None:
    field = To.fetched(Many["Book"], ["anything"])

    assert field.as_fetched == ("anything",)


def test_unknown_carries_no_payload() -> None:
    with pytest.raises(ValueError):
        Related(Many, RelatedState.UNKNOWN, ())


def test_with_related_returns_new_entity() -> None:
    store = make_store()
    updated = store.with_related("books", To.unfetched(Many[Book], pointers("9")))

    assert store.books.is_unknown
    assert updated.books.as_unfetched == tuple(pointers("9"))
    assert updated.head == store.head
    assert updated.name == store.name


def test_with_related_accepts_related_value() -> None:
    updated = make_store().with_related("books", Related.unfetched(Many[Book], []))

    assert updated.books.as_unfetched == ()


def test_with_related_rejects_unknown_name_and_cardinality() -> None:
    store = make_store()
    with pytest.raises(ValueError):
        store.with_related("name", To.unknown(Many[Book]))
    with pytest.raises(ValueError):
        store.with_related("books", To.unknown(One[Book]))


def test_entities_are_immutable() -> None:
    store = make_store()
    with pytest.raises(AttributeError):
        store.name = "other"  # type: ignore[misc]
    assert Author(
        head=Head(id="1"),
        name="n",
        birth=date(1900, 1, 1),
        death=None,
        books=To.unknown(Many[Book]),
        photos=To.unknown(Many["Photo"]),
    ).id == "1"


def make_author() -> Author:
    return Author(
        head=Head(id="3", type="authors"),
        name="Ursula K. Le Guin",
        birth=date(1929, 10, 21),
        death=date(2018, 1, 22),
        books=To.unknown(Many[Book]),
        photos=To.unknown(Many["Photo"]),
    )


def test_with_related_rejects_other_element_type() -> None:
    store = make_store()
    with pytest.raises(ValueError):
        store.with_related("books", To.fetched(Many[Author], (make_author(),)))
    with pytest.raises(ValueError):
        store.with_related("books", To.unfetched(Many[Author], []))


def test_with_related_checks_unresolved_fetched_elements() -> None:
    with pytest.raises(ValueError):
        make_store().with_related("books", To.fetched(Many["Book"], (make_author(),)))


def test_state_given_as_string_is_coerced() -> None:
    unknown = Related(Many, "unknown")
    unfetched = Related(Many, "unfetched", pointers("1"))

    assert unknown.state is RelatedState.UNKNOWN
    assert unknown.value is None
    assert unfetched.state is RelatedState.UNFETCHED
    assert unfetched.value == tuple(pointers("1"))
    with pytest.raises(ValueError):
        Related(Many, "pending")
