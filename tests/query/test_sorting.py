"""
Test suite for the comparator sorter.

Sections:
- Text and numeric ordering
- Stability in both directions
- Missing sort keys (always last)
- Mixed value types
"""

from __future__ import annotations

import pytest

from moto_specs.domain.motorcycle import Motorcycle, SortOrder, SortSpec
from moto_specs.query.sorting import comparison_key, sort_motorcycles


@pytest.fixture()
def motorcycles() -> tuple[Motorcycle, ...]:
    return (
        Motorcycle(name="cbr600", brand="Honda", type="Sport", year=2020, engine="599cc"),
        Motorcycle(name="MT07", brand="Yamaha", type="Naked", year=2019, engine="689cc"),
        Motorcycle(name="CBR500", brand="Honda", type="Sport", year=2021, engine="471cc"),
        Motorcycle(name="Ninja 400", brand="kawasaki", type="Sport", year=2019, engine="399cc"),
    )


def names(motorcycles: tuple[Motorcycle, ...]) -> list[str | None]:
    return [motorcycle.name for motorcycle in motorcycles]


# ==============================================================================
# Text and numeric ordering
# ==============================================================================


def test_sort_by_name_ascending_ignores_case(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="name"))

    assert names(result) == ["CBR500", "cbr600", "MT07", "Ninja 400"]


def test_sort_by_name_descending(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="name", order=SortOrder.DESC))

    assert names(result) == ["Ninja 400", "MT07", "cbr600", "CBR500"]


def test_sort_by_year_uses_numeric_order() -> None:
    dataset = (
        Motorcycle(name="A", year=2100),
        Motorcycle(name="B", year=999),
        Motorcycle(name="C", year=2020),
    )

    assert names(sort_motorcycles(dataset, SortSpec(key="year"))) == ["B", "C", "A"]


def test_sort_by_engine_is_lexicographic_text(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="engine"))

    assert [m.engine for m in result] == ["399cc", "471cc", "599cc", "689cc"]


def test_sort_returns_new_sequence_without_mutating_input() -> None:
    dataset = [Motorcycle(name="b"), Motorcycle(name="a")]

    result = sort_motorcycles(dataset, SortSpec(key="name"))

    assert names(result) == ["a", "b"]
    assert [m.name for m in dataset] == ["b", "a"]


def test_sort_empty_sequence() -> None:
    assert sort_motorcycles((), SortSpec(key="year", order=SortOrder.DESC)) == ()


# ==============================================================================
# Stability
# ==============================================================================


def test_equal_keys_keep_input_order_ascending(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="brand"))

    # Honda ties keep input order: cbr600 before CBR500
    assert names(result) == ["cbr600", "CBR500", "Ninja 400", "MT07"]


def test_equal_keys_keep_input_order_descending(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="brand", order=SortOrder.DESC))

    # Descending flips the comparison, not the ties
    assert names(result) == ["MT07", "Ninja 400", "cbr600", "CBR500"]


def test_descending_year_ties_keep_input_order(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="year", order=SortOrder.DESC))

    assert names(result) == ["CBR500", "cbr600", "MT07", "Ninja 400"]


def test_case_variants_are_ties() -> None:
    dataset = (Motorcycle(name="honda", brand="x"), Motorcycle(name="HONDA", brand="y"))

    for order in SortOrder:
        result = sort_motorcycles(dataset, SortSpec(key="name", order=order))
        assert [m.brand for m in result] == ["x", "y"]


def test_toggling_order_twice_restores_order(motorcycles: tuple[Motorcycle, ...]) -> None:
    ascending = sort_motorcycles(motorcycles, SortSpec(key="name"))
    descending = sort_motorcycles(ascending, SortSpec(key="name", order=SortOrder.DESC))
    back = sort_motorcycles(descending, SortSpec(key="name"))

    assert back == ascending
    assert descending == tuple(reversed(ascending))


# ==============================================================================
# Missing sort keys
# ==============================================================================


def test_missing_values_sort_last_ascending() -> None:
    dataset = (
        Motorcycle(name="A"),
        Motorcycle(name="B", year=2020),
        Motorcycle(name="C"),
        Motorcycle(name="D", year=2018),
    )

    assert names(sort_motorcycles(dataset, SortSpec(key="year"))) == ["D", "B", "A", "C"]


def test_missing_values_sort_last_descending() -> None:
    dataset = (
        Motorcycle(name="A"),
        Motorcycle(name="B", year=2020),
        Motorcycle(name="C"),
        Motorcycle(name="D", year=2018),
    )

    result = sort_motorcycles(dataset, SortSpec(key="year", order=SortOrder.DESC))

    assert names(result) == ["B", "D", "A", "C"]


def test_unknown_sort_key_keeps_input_order(motorcycles: tuple[Motorcycle, ...]) -> None:
    result = sort_motorcycles(motorcycles, SortSpec(key="horsepower", order=SortOrder.DESC))

    assert result == motorcycles


def test_sort_by_extra_field() -> None:
    dataset = (
        Motorcycle(name="Heavy", extras={"weight_kg": 210}),
        Motorcycle(name="Light", extras={"weight_kg": 140}),
        Motorcycle(name="Unweighed"),
    )

    assert names(sort_motorcycles(dataset, SortSpec(key="weight_kg"))) == [
        "Light",
        "Heavy",
        "Unweighed",
    ]


# ==============================================================================
# Mixed value types
# ==============================================================================


def test_mixed_types_do_not_raise_and_group_numbers_first() -> None:
    dataset = (
        Motorcycle(name="text", extras={"rank": "b"}),
        Motorcycle(name="number", extras={"rank": 3}),
        Motorcycle(name="other", extras={"rank": [1]}),
        Motorcycle(name="float", extras={"rank": 1.5}),
    )

    result = sort_motorcycles(dataset, SortSpec(key="rank"))

    assert names(result) == ["float", "number", "text", "other"]


def test_comparison_key_lowercases_text() -> None:
    assert comparison_key("HoNdA") == comparison_key("honda")
    assert comparison_key(2020) < comparison_key("2019")
