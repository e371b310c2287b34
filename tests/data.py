from steamid import Universe, AccountType, Instance

# id64: (account_id, instance, type, universe)
KNOWN_IDS = {
    76561197960287930: (22202, Instance.DESKTOP, AccountType.INDIVIDUAL, Universe.PUBLIC),
    76561197969249708: (8983980, Instance.DESKTOP, AccountType.INDIVIDUAL, Universe.PUBLIC),
    103582791432294076: (2772668, Instance.ALL, AccountType.CLAN, Universe.PUBLIC),
    157626004137848889: (12345, Instance.WEB, AccountType.GAMESERVER, Universe.BETA),
    90072009727279227: (123, Instance.WEB, AccountType.ANON_GAMESERVER, Universe.PUBLIC),
}

# canonical Steam3 renders, parse(render) and render(parse) are identical for these
SYMMETRIC_STEAM3 = [
    "[U:1:123]",
    "[U:1:123:2]",
    "[U:1:123:0]",
    "[G:1:626]",
    "[A:2:165:1]",
    "[A:1:4491230:0]",
    "[M:1:77:0]",
    "[T:1:123]",
    "[c:1:123]",
    "[L:1:123]",
    "[g:1:2772668]",
    "[a:1:5:7]",
    "[I:1:0]",
    "[P:4:1]",
    "[C:5:1]",
]

# out of 4 bits of type code only 0..10 are known
UNKNOWN_TYPE_CODES = list(range(11, 16))

# 0 is Universe.INVALID, 6.. are unknown
BAD_UNIVERSE_CODES = [0, 6, 7, 100, 255]
