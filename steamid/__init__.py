"""
Parse, validate and render Steam IDs: 64-bit, Steam2 and Steam3 representations.
"""

from .exceptions import (
    SteamIDError,
    InvalidAccountType,
    InvalidUniverse,
    FieldOutOfRange,
    MalformedSteam2,
    MalformedSteam3,
    MalformedSteamID,
    UnsupportedAccountType,
)
from .constants import Universe, AccountType, Instance, ChatInstanceFlag, STEAM_URL
from .id import SteamID
from .steam2 import parse_steam2, render_steam2
from .steam3 import parse_steam3, render_steam3
from .utils import account_id_to_steam_id, steam_id_to_account_id, id64_to_id32, id32_to_id64
