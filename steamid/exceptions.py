class SteamIDError(ValueError):
    """All errors related to SteamID construction, parsing and rendering"""


class InvalidAccountType(SteamIDError):
    """Raised when account type code is not one of known `AccountType` members"""


class InvalidUniverse(SteamIDError):
    """Raised when universe code is not one of known `Universe` members or is `Universe.INVALID`"""


class FieldOutOfRange(SteamIDError):
    """Raised when account id, instance or raw id64 value doesn't fit its bit width"""


class MalformedSteam2(SteamIDError):
    """Raised when text doesn't match `STEAM_X:Y:Z` format"""


class MalformedSteam3(SteamIDError):
    """Raised when text doesn't match `[T:U:A]` or `[T:U:A:I]` format"""


class MalformedSteamID(MalformedSteam2, MalformedSteam3):
    """Raised when text matches none of known SteamID formats"""


class UnsupportedAccountType(SteamIDError):
    """Raised when account type can't be represented losslessly in requested format"""

    def __init__(self, msg: str, account_type: int):
        self.msg = msg
        self.account_type = account_type

    def __str__(self):
        return self.msg
