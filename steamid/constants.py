"""Constants and enums, bit layout of the packed id"""

from enum import IntEnum

from yarl import URL

# packed id64 layout, offsets counted from the least significant bit
ACCOUNT_ID_OFFSET = 0
INSTANCE_OFFSET = 32
ACCOUNT_TYPE_OFFSET = 52
UNIVERSE_OFFSET = 56

ACCOUNT_ID_MASK = 0xFFFFFFFF
ACCOUNT_INSTANCE_MASK = 0xFFFFF
ACCOUNT_TYPE_MASK = 0xF
UNIVERSE_MASK = 0xFF

ID64_MASK = 0xFFFFFFFFFFFFFFFF


class Universe(IntEnum):
    """
    Steam universe types.

    .. seealso:: https://developer.valvesoftware.com/wiki/SteamID#Universes_Available_for_Steam_Accounts
    """

    INVALID = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5

    @classmethod
    def get(cls, v: int) -> "Universe | None":
        try:
            return cls(v)
        except ValueError:
            return None


class AccountType(IntEnum):
    """Steam account types"""

    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAMESERVER = 3
    ANON_GAMESERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    P2P_SUPER_SEEDER = 9
    ANON_USER = 10

    @classmethod
    def get(cls, v: int) -> "AccountType | None":
        try:
            return cls(v)
        except ValueError:
            return None


class Instance(IntEnum):
    """
    Well-known instance values.
    Instance field can hold any 20-bit value, these are just named ones.
    """

    ALL = 0
    DESKTOP = 1
    CONSOLE = 2
    WEB = 4


class ChatInstanceFlag(IntEnum):
    """Flags kept in the top bits of a chat id instance"""

    CLAN = (ACCOUNT_INSTANCE_MASK + 1) >> 1
    LOBBY = (ACCOUNT_INSTANCE_MASK + 1) >> 2
    MMS_LOBBY = (ACCOUNT_INSTANCE_MASK + 1) >> 3


# steam3 type letters, render side. `P2P_SUPER_SEEDER` has no letter
TYPE_CHARS: dict[AccountType, str] = {
    AccountType.INVALID: "I",
    AccountType.INDIVIDUAL: "U",
    AccountType.MULTISEAT: "M",
    AccountType.GAMESERVER: "G",
    AccountType.ANON_GAMESERVER: "A",
    AccountType.PENDING: "P",
    AccountType.CONTENT_SERVER: "C",
    AccountType.CLAN: "g",
    AccountType.CHAT: "T",
    AccountType.ANON_USER: "a",
}

# parse side, letter -> (type, flag of chat instance)
CHAR_TYPES: dict[str, tuple[AccountType, int]] = {
    **{char: (account_type, 0) for account_type, char in TYPE_CHARS.items()},
    "i": (AccountType.INVALID, 0),
    "c": (AccountType.CHAT, ChatInstanceFlag.CLAN),
    "L": (AccountType.CHAT, ChatInstanceFlag.LOBBY),
}

# instance assumed when steam3 text omits it
DEFAULT_INSTANCES: dict[str, int] = {
    "U": Instance.DESKTOP,
    "c": ChatInstanceFlag.CLAN,
    "L": ChatInstanceFlag.LOBBY,
}

# steam3 always carries instance for these types, even when it's the default one
ALWAYS_RENDER_INSTANCE = frozenset({AccountType.ANON_GAMESERVER, AccountType.MULTISEAT})


class STEAM_URL:
    COMMUNITY = URL("https://steamcommunity.com")
    PROFILES = COMMUNITY / "profiles"
    GROUPS = COMMUNITY / "gid"
