import logging
from functools import total_ordering

from yarl import URL

from .constants import (
    ACCOUNT_ID_MASK,
    ACCOUNT_INSTANCE_MASK,
    ACCOUNT_TYPE_MASK,
    UNIVERSE_MASK,
    ID64_MASK,
    ACCOUNT_ID_OFFSET,
    INSTANCE_OFFSET,
    ACCOUNT_TYPE_OFFSET,
    UNIVERSE_OFFSET,
    STEAM_URL,
    Universe,
    AccountType,
    Instance,
    ChatInstanceFlag,
)
from .exceptions import (
    InvalidAccountType,
    InvalidUniverse,
    FieldOutOfRange,
    MalformedSteamID,
    UnsupportedAccountType,
)

__all__ = ("SteamID",)

logger = logging.getLogger(__name__)


def _pack(account_id: int, instance: int, account_type: int, universe: int) -> int:
    """Validate fields and pack them into id64. Every way to get a `SteamID` ends up here."""

    valid_type = AccountType.get(account_type)
    if valid_type is None:
        raise InvalidAccountType(f"Unknown account type: {account_type!r}")

    valid_universe = Universe.get(universe)
    if valid_universe is None or valid_universe is Universe.INVALID:
        raise InvalidUniverse(f"Unknown or invalid universe: {universe!r}")

    if not 0 <= account_id <= ACCOUNT_ID_MASK:
        raise FieldOutOfRange(f"Account id {account_id} doesn't fit 32 bits")

    if not 0 <= instance <= ACCOUNT_INSTANCE_MASK:
        raise FieldOutOfRange(f"Instance {instance} doesn't fit 20 bits")

    return (
        int(valid_universe) << UNIVERSE_OFFSET
        | int(valid_type) << ACCOUNT_TYPE_OFFSET
        | instance << INSTANCE_OFFSET
        | account_id << ACCOUNT_ID_OFFSET
    )


@total_ordering
class SteamID:
    """
    Represents a Steam ID and provides methods for parsing and rendering
    in various formats (Steam2, Steam3, 32-bit, 64-bit).

    Instance is always valid: constructor, `from_*` methods and field setters
    raise `SteamIDError` subclasses instead of producing an invalid id.
    """

    __slots__ = ("_id64",)

    def __init__(
        self,
        account_id: int,
        instance: int = Instance.DESKTOP,
        account_type: AccountType | int = AccountType.INDIVIDUAL,
        universe: Universe | int = Universe.PUBLIC,
    ):
        """
        :param account_id: 32-bit account id (id32).
        :param instance: 20-bit instance, `Instance` member or any other value that fits.
        :param account_type: must be one of `AccountType` members.
        :param universe: must be one of `Universe` members, except `Universe.INVALID`.
        :raises InvalidAccountType:
        :raises InvalidUniverse:
        :raises FieldOutOfRange: when account id or instance doesn't fit its bit width.
        """

        self._id64 = _pack(account_id, instance, account_type, universe)

    @classmethod
    def from_id64(cls, id64: int) -> "SteamID":
        """Unpack 64-bit representation. Same validation as constructor applies."""

        if not 0 <= id64 <= ID64_MASK:
            raise FieldOutOfRange(f"ID {id64} doesn't fit 64 bits")

        return cls(
            (id64 >> ACCOUNT_ID_OFFSET) & ACCOUNT_ID_MASK,
            (id64 >> INSTANCE_OFFSET) & ACCOUNT_INSTANCE_MASK,
            (id64 >> ACCOUNT_TYPE_OFFSET) & ACCOUNT_TYPE_MASK,
            (id64 >> UNIVERSE_OFFSET) & UNIVERSE_MASK,
        )

    @classmethod
    def from_steam2(cls, steam2: str) -> "SteamID":
        """Parse Steam2 format (e.g. `STEAM_1:0:23071901`)"""

        from .steam2 import parse_steam2

        return parse_steam2(steam2)

    @classmethod
    def from_steam3(cls, steam3: str) -> "SteamID":
        """Parse Steam3 format (e.g. `[U:1:46143802]`)"""

        from .steam3 import parse_steam3

        return parse_steam3(steam3)

    @classmethod
    def parse(cls, input_id: "SteamID | str | int") -> "SteamID":
        """
        Create `SteamID` from any supported representation.

        :param input_id: Can be a 32/64-bit integer or string representation, a Steam2 format string (STEAM_X:Y:Z),
            or a Steam3 format string ([U:X:Y]). 32-bit values are treated as public individual account ids
        """

        if isinstance(input_id, SteamID):
            return cls.from_id64(input_id.id64)

        if isinstance(input_id, str) and input_id.isascii() and input_id.isdigit():
            input_id = int(input_id)

        if isinstance(input_id, int):  # numeric formats
            if 0 <= input_id <= ACCOUNT_ID_MASK:
                return cls(input_id)

            return cls.from_id64(input_id)

        if isinstance(input_id, str):  # Steam2/3 formats
            if input_id.startswith("STEAM_"):
                return cls.from_steam2(input_id)

            elif input_id.startswith("["):
                return cls.from_steam3(input_id)

            logger.debug("Rejected SteamID input of unknown format: %r", input_id)
            raise MalformedSteamID(f'Unknown SteamID input format: "{input_id}"')

        raise TypeError(f"Can't create SteamID from {type(input_id).__name__}")

    # fields

    @property
    def account_id(self) -> int:
        return (self._id64 >> ACCOUNT_ID_OFFSET) & ACCOUNT_ID_MASK

    @account_id.setter
    def account_id(self, value: int):
        self._id64 = _pack(value, self.instance, self.type, self.universe)

    @property
    def instance(self) -> int:
        """Instance value. Plain `int` as it may carry chat flags along with `Instance` values"""
        return (self._id64 >> INSTANCE_OFFSET) & ACCOUNT_INSTANCE_MASK

    @instance.setter
    def instance(self, value: int):
        self._id64 = _pack(self.account_id, value, self.type, self.universe)

    @property
    def type(self) -> AccountType:
        return AccountType((self._id64 >> ACCOUNT_TYPE_OFFSET) & ACCOUNT_TYPE_MASK)

    @type.setter
    def type(self, value: AccountType | int):
        self._id64 = _pack(self.account_id, self.instance, value, self.universe)

    @property
    def universe(self) -> Universe:
        return Universe((self._id64 >> UNIVERSE_OFFSET) & UNIVERSE_MASK)

    @universe.setter
    def universe(self, value: Universe | int):
        self._id64 = _pack(self.account_id, self.instance, self.type, value)

    def replace(
        self,
        *,
        account_id: int = None,
        instance: int = None,
        account_type: AccountType | int = None,
        universe: Universe | int = None,
    ) -> "SteamID":
        """Return new `SteamID` with given fields replaced. Current instance is left untouched."""

        return type(self)(
            self.account_id if account_id is None else account_id,
            self.instance if instance is None else instance,
            self.type if account_type is None else account_type,
            self.universe if universe is None else universe,
        )

    # checks

    def is_individual(self) -> bool:
        """
        Check if this is an individual user ID in the public universe with a desktop instance.
        This is what most people think of when they think of a SteamID

        .. note:: Does not check whether the account actually exists
        """

        return (
            self.universe == Universe.PUBLIC
            and self.type == AccountType.INDIVIDUAL
            and self.instance == Instance.DESKTOP
        )

    def is_clan(self) -> bool:
        return self.type == AccountType.CLAN

    def is_group_chat(self) -> bool:
        """Check if this ID represents a legacy group chat"""

        return self.type == AccountType.CHAT and bool(self.instance & ChatInstanceFlag.CLAN)

    def is_lobby(self) -> bool:
        """Check if this ID represents a game lobby"""

        return self.type == AccountType.CHAT and bool(
            self.instance & (ChatInstanceFlag.LOBBY | ChatInstanceFlag.MMS_LOBBY)
        )

    # renders

    @property
    def steam2(self) -> str:
        """
        ID in the newer Steam2 format (e.g., "STEAM_1:0:23071901")

        .. note:: Available only for individual ID
        """

        from .steam2 import render_steam2

        return render_steam2(self)

    @property
    def steam2_zero(self) -> str:
        """
        ID in the legacy Steam2 format of GoldSrc and Orange Box games (e.g., "STEAM_0:0:23071901")

        .. note:: Available only for individual ID
        """

        from .steam2 import render_steam2

        return render_steam2(self, legacy_zero=True)

    @property
    def steam3(self) -> str:
        """ID in Steam3 format (e.g., "[U:1:46143802]")"""

        from .steam3 import render_steam3

        return render_steam3(self)

    @property
    def community_url(self) -> URL:
        """
        Steam Community page url of this ID.

        .. note:: Available only for individual and clan IDs
        """

        if self.type == AccountType.INDIVIDUAL:
            return STEAM_URL.PROFILES / str(self.id64)
        elif self.type == AccountType.CLAN:
            return STEAM_URL.GROUPS / str(self.id64)

        raise UnsupportedAccountType(f"Steam Community has no page for {self.type.name} ID", self.type)

    @property
    def id32(self) -> int:
        """32-bit representation of this Steam ID. Alias to `account_id`"""
        return self.account_id

    @property
    def id64(self) -> int:
        """64-bit representation of this Steam ID"""
        return self._id64

    def __str__(self):
        return str(self._id64)

    def __int__(self):
        return self._id64

    def __repr__(self):
        return (
            f"{self.__class__.__name__}"
            f"(id64={self._id64}, "
            f"universe={self.universe!r}, "
            f"type={self.type!r}, "
            f"instance={self.instance}, "
            f"account_id={self.account_id})"
        )

    def __eq__(self, other):
        if not isinstance(other, SteamID):
            return NotImplemented
        return self._id64 == other._id64

    def __lt__(self, other):
        if not isinstance(other, SteamID):
            return NotImplemented
        return self._id64 < other._id64

    def __hash__(self):
        return hash(self._id64)
