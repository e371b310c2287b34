"""Shortcuts for the most common case: public individual accounts"""

from .constants import Universe, AccountType, Instance
from .id import SteamID

__all__ = (
    "account_id_to_steam_id",
    "steam_id_to_account_id",
    "id64_to_id32",
    "id32_to_id64",
)


def steam_id_to_account_id(steam_id: int) -> int:
    """Convert steam id64 to steam id32."""

    return SteamID.from_id64(steam_id).account_id


def account_id_to_steam_id(account_id: int) -> int:
    """Convert steam id32 of public individual account to steam id64."""

    return SteamID(account_id, Instance.DESKTOP, AccountType.INDIVIDUAL, Universe.PUBLIC).id64


id64_to_id32 = steam_id_to_account_id
id32_to_id64 = account_id_to_steam_id
