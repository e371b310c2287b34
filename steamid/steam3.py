"""
Steam3 text format: `[T:U:A]` or `[T:U:A:I]`.

`T` is a type letter, `U` is the universe, `A` is account id and optional `I` is the instance.
Chat ids have two extra letters: `c` (clan chat) and `L` (lobby), each implies an instance flag.

.. seealso:: https://developer.valvesoftware.com/wiki/SteamID#Types_of_Steam_Accounts
"""

import logging
from re import compile as re_compile

from .constants import (
    ACCOUNT_ID_MASK,
    ACCOUNT_INSTANCE_MASK,
    UNIVERSE_MASK,
    TYPE_CHARS,
    CHAR_TYPES,
    DEFAULT_INSTANCES,
    ALWAYS_RENDER_INSTANCE,
    AccountType,
    Instance,
    ChatInstanceFlag,
)
from .exceptions import MalformedSteam3, UnsupportedAccountType
from .id import SteamID

__all__ = ("STEAM_3_FORMAT_RE", "parse_steam3", "render_steam3")

logger = logging.getLogger(__name__)

STEAM_3_FORMAT_RE = re_compile(r"\[([a-zA-Z]):([0-9]{1,3}):([0-9]{1,10})(?::([0-9]{1,7}))?]")


def _malformed(steam3: str, reason: str) -> MalformedSteam3:
    logger.debug("Rejected malformed Steam3 id %r: %s", steam3, reason)
    return MalformedSteam3(f'Invalid Steam3 id "{steam3}": {reason}')


def parse_steam3(steam3: str) -> SteamID:
    """
    Parse `[T:U:A]`/`[T:U:A:I]` text into `SteamID`.

    When instance is omitted, `U` ids get desktop instance, `c` and `L` get their chat flag
    and the rest get `Instance.ALL`.

    :raises MalformedSteam3: text doesn't match the format, type letter is unknown
        or some number doesn't fit its bit width.
    :raises InvalidUniverse: universe is not a known universe.
    """

    match = STEAM_3_FORMAT_RE.fullmatch(steam3)
    if match is None:
        raise _malformed(steam3, "doesn't match [T:U:A] or [T:U:A:I] format")

    type_char, universe, account_id, instance = match.groups()

    if type_char not in CHAR_TYPES:
        raise _malformed(steam3, f"unknown type letter {type_char!r}")
    account_type, flag = CHAR_TYPES[type_char]

    universe = int(universe)
    if universe > UNIVERSE_MASK:
        raise _malformed(steam3, "universe doesn't fit 8 bits")

    account_id = int(account_id)
    if account_id > ACCOUNT_ID_MASK:
        raise _malformed(steam3, "account id doesn't fit 32 bits")

    if instance is None:
        instance = DEFAULT_INSTANCES.get(type_char, Instance.ALL)
    else:
        instance = int(instance)
        if instance > ACCOUNT_INSTANCE_MASK:
            raise _malformed(steam3, "instance doesn't fit 20 bits")
        instance |= flag

    return SteamID(account_id, instance, account_type, universe)


def render_steam3(steam_id: SteamID) -> str:
    """
    Render `SteamID` as `[T:U:A]`, or `[T:U:A:I]` when instance differs from the one implied by the type letter.
    Anonymous game server and multiseat ids always carry instance.

    :raises UnsupportedAccountType: account type has no Steam3 letter (`AccountType.P2P_SUPER_SEEDER`).
    """

    account_type = steam_id.type
    instance = steam_id.instance

    type_char = TYPE_CHARS.get(account_type)
    if type_char is None:
        raise UnsupportedAccountType(f"Steam3 has no type letter for {account_type.name} Steam ID", account_type)

    if account_type == AccountType.CHAT:
        if instance & ChatInstanceFlag.CLAN:
            type_char = "c"
        elif instance & ChatInstanceFlag.LOBBY:
            type_char = "L"

    should_render_instance = (
        account_type in ALWAYS_RENDER_INSTANCE or instance != DEFAULT_INSTANCES.get(type_char, Instance.ALL)
    )

    instance_str = f":{instance}" if should_render_instance else ""
    return f"[{type_char}:{int(steam_id.universe)}:{steam_id.account_id}{instance_str}]"
