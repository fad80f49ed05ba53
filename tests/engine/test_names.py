from __future__ import annotations

import pytest

from panchanga.engine.vedic.names import (
    KARANA_MOVABLE,
    MASA_NAMES,
    NAKSHATRA_NAMES,
    TITHI_NAMES,
    YOGA_NAMES,
    karana_name,
    masa_name,
    nakshatra_name,
    paksha_for_tithi,
    raasi_name,
    tithi_name,
    vaara_name,
    yoga_name,
)


def test_table_sizes() -> None:
    assert len(TITHI_NAMES) == 30
    assert len(NAKSHATRA_NAMES) == 27
    assert len(YOGA_NAMES) == 27
    assert len(MASA_NAMES) == 12


@pytest.mark.parametrize(
    ("number", "expected"),
    [(1, "Pratipad"), (15, "Purnima"), (16, "Pratipad"), (29, "Chaturdashi"), (30, "Amavasya")],
)
def test_tithi_names(number: int, expected: str) -> None:
    assert tithi_name(number) == expected


def test_paksha_split() -> None:
    assert paksha_for_tithi(1) == "Shukla"
    assert paksha_for_tithi(15) == "Shukla"
    assert paksha_for_tithi(16) == "Krishna"
    assert paksha_for_tithi(30) == "Krishna"


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (1, "Bava"),
        (7, "Vishti"),
        (8, "Bava"),
        (14, "Vishti"),
        (56, "Vishti"),
        (57, "Shakuni"),
        (58, "Chatushpada"),
        (59, "Naga"),
        (60, "Kimstughna"),
    ],
)
def test_karana_names(number: int, expected: str) -> None:
    assert karana_name(number) == expected


def test_karana_movable_cycle_covers_positions() -> None:
    names = [karana_name(n) for n in range(1, 57)]
    assert names == list(KARANA_MOVABLE) * 8


def test_lookup_fallbacks_do_not_raise() -> None:
    assert tithi_name(0) == "Tithi 0"
    assert tithi_name(31) == "Tithi 31"
    assert nakshatra_name(28) == "Nakshatra 28"
    assert yoga_name(-1) == "Yoga -1"
    assert karana_name(61) == "Karana 61"
    assert masa_name(13) == "Masa 13"
    assert raasi_name(0) == "Raasi 0"
    assert vaara_name(7) == "Vaara 7"


def test_named_entries() -> None:
    assert nakshatra_name(5) == "Mrigashira"
    assert yoga_name(9) == "Shula"
    assert yoga_name(18) == "Variyan"
    assert masa_name(7) == "Ashwin"
    assert masa_name(8) == "Kartik"
    assert raasi_name(1) == "Mesha"
    assert vaara_name(0) == "Ravivara"
    assert vaara_name(3) == "Budhavara"
