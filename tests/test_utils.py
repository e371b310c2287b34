import pytest

from steamid import (
    id32_to_id64,
    id64_to_id32,
    account_id_to_steam_id,
    steam_id_to_account_id,
    FieldOutOfRange,
    InvalidUniverse,
)


def test_id32_to_id64():
    assert id32_to_id64(22202) == account_id_to_steam_id(22202) == 76561197960287930
    assert id32_to_id64(0) == 76561197960265728


def test_id64_to_id32():
    assert id64_to_id32(76561197960287930) == steam_id_to_account_id(76561197960287930) == 22202
    assert id64_to_id32(103582791432294076) == 2772668


def test_invalid_input():
    with pytest.raises(FieldOutOfRange):
        id32_to_id64(1 << 32)

    with pytest.raises(InvalidUniverse):
        id64_to_id32(22202)  # universe bits are zero
