"""
Steam2 text format: `STEAM_X:Y:Z`.

`X` is the universe, `Y` is the lowest bit of account id and `Z` is the rest of account id.
Steam2 carries neither account type nor instance, so only individual desktop ids are expressible.

GoldSrc and Orange Box games render public universe as `0` instead of `1`,
so both digits are parsed as `Universe.PUBLIC`. Rendering uses `1` unless asked for legacy form.
"""

import logging
from re import compile as re_compile

from .constants import ACCOUNT_ID_MASK, Universe, AccountType, Instance
from .exceptions import MalformedSteam2, UnsupportedAccountType
from .id import SteamID

__all__ = ("STEAM_2_FORMAT_RE", "parse_steam2", "render_steam2")

logger = logging.getLogger(__name__)

STEAM_2_FORMAT_RE = re_compile(r"STEAM_([0-9]):([01]):([0-9]{1,10})")


def parse_steam2(steam2: str) -> SteamID:
    """
    Parse `STEAM_X:Y:Z` text into individual desktop `SteamID`.

    :raises MalformedSteam2: text doesn't match the format or account id overflows 32 bits.
    :raises InvalidUniverse: universe digit is not a known universe.
    """

    match = STEAM_2_FORMAT_RE.fullmatch(steam2)
    if match is None:
        logger.debug("Rejected malformed Steam2 id: %r", steam2)
        raise MalformedSteam2(f'Invalid STEAM_X:Y:Z format: "{steam2}"')

    universe_str, mod, high = match.groups()

    account_id = int(high) * 2 + int(mod)
    if account_id > ACCOUNT_ID_MASK:
        logger.debug("Rejected Steam2 id with overflowing account id: %r", steam2)
        raise MalformedSteam2(f'Account id of "{steam2}" doesn\'t fit 32 bits')

    universe = int(universe_str) or Universe.PUBLIC  # 0 -> 1

    return SteamID(account_id, Instance.DESKTOP, AccountType.INDIVIDUAL, universe)


def render_steam2(steam_id: SteamID, legacy_zero: bool = False) -> str:
    """
    Render individual `SteamID` as `STEAM_X:Y:Z`.

    :param legacy_zero: render public universe as `0`, like GoldSrc and Orange Box games do.
    :raises UnsupportedAccountType: ID is not an individual one.
    """

    if steam_id.type != AccountType.INDIVIDUAL:
        raise UnsupportedAccountType(
            f"Can't get Steam2 rendered ID for {steam_id.type.name} Steam ID",
            steam_id.type,
        )

    universe = int(steam_id.universe)
    if legacy_zero and universe == Universe.PUBLIC:
        universe = 0

    account_id = steam_id.account_id
    return f"STEAM_{universe}:{account_id & 1}:{account_id >> 1}"
