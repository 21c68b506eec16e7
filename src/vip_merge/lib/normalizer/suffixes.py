"""Street suffix lookup table.

USPS Publication 28, Appendix C1: every primary street suffix name, the
common variants seen in the wild, and the Postal Service standard
abbreviation. Used as an exact-token membership test when locating the end
of a street address inside a flattened row.
"""

# One line per primary suffix: primary name, common variants, standard abbreviation
_USPS_SUFFIXES: tuple[str, ...] = (
    "ALLEY", "ALLEE", "ALLY", "ALY",
    "ANNEX", "ANEX", "ANNX", "ANX",
    "ARCADE", "ARC",
    "AVENUE", "AV", "AVE", "AVEN", "AVENU", "AVN", "AVNUE",
    "BAYOU", "BAYOO", "BYU",
    "BEACH", "BCH",
    "BEND", "BND",
    "BLUFF", "BLUF", "BLF",
    "BLUFFS", "BLFS",
    "BOTTOM", "BOT", "BOTTM", "BTM",
    "BOULEVARD", "BOUL", "BOULV", "BLVD",
    "BRANCH", "BRNCH", "BR",
    "BRIDGE", "BRDGE", "BRG",
    "BROOK", "BRK",
    "BROOKS", "BRKS",
    "BURG", "BG",
    "BURGS", "BGS",
    "BYPASS", "BYPA", "BYPAS", "BYPS", "BYP",
    "CAMP", "CMP", "CP",
    "CANYON", "CANYN", "CNYN", "CYN",
    "CAPE", "CPE",
    "CAUSEWAY", "CAUSWA", "CSWY",
    "CENTER", "CEN", "CENT", "CENTR", "CENTRE", "CNTER", "CNTR", "CTR",
    "CENTERS", "CTRS",
    "CIRCLE", "CIRC", "CIRCL", "CRCL", "CRCLE", "CIR",
    "CIRCLES", "CIRS",
    "CLIFF", "CLF",
    "CLIFFS", "CLFS",
    "CLUB", "CLB",
    "COMMON", "CMN",
    "COMMONS", "CMNS",
    "CORNER", "COR",
    "CORNERS", "CORS",
    "COURSE", "CRSE",
    "COURT", "CT",
    "COURTS", "CTS",
    "COVE", "CV",
    "COVES", "CVS",
    "CREEK", "CRK",
    "CRESCENT", "CRSENT", "CRSNT", "CRES",
    "CREST", "CRST",
    "CROSSING", "CRSSNG", "XING",
    "CROSSROAD", "XRD",
    "CROSSROADS", "XRDS",
    "CURVE", "CURV",
    "DALE", "DL",
    "DAM", "DM",
    "DIVIDE", "DIV", "DVD", "DV",
    "DRIVE", "DRIV", "DRV", "DR",
    "DRIVES", "DRS",
    "ESTATE", "EST",
    "ESTATES", "ESTS",
    "EXPRESSWAY", "EXP", "EXPR", "EXPRESS", "EXPW", "EXPY",
    "EXTENSION", "EXTN", "EXTNSN", "EXT",
    "EXTENSIONS", "EXTS",
    "FALL",
    "FALLS", "FLS",
    "FERRY", "FRRY", "FRY",
    "FIELD", "FLD",
    "FIELDS", "FLDS",
    "FLAT", "FLT",
    "FLATS", "FLTS",
    "FORD", "FRD",
    "FORDS", "FRDS",
    "FOREST", "FORESTS", "FRST",
    "FORGE", "FORG", "FRG",
    "FORGES", "FRGS",
    "FORK", "FRK",
    "FORKS", "FRKS",
    "FORT", "FRT", "FT",
    "FREEWAY", "FREEWY", "FRWAY", "FRWY", "FWY",
    "GARDEN", "GARDN", "GRDEN", "GRDN", "GDN",
    "GARDENS", "GRDNS", "GDNS",
    "GATEWAY", "GATEWY", "GATWAY", "GTWAY", "GTWY",
    "GLEN", "GLN",
    "GLENS", "GLNS",
    "GREEN", "GRN",
    "GREENS", "GRNS",
    "GROVE", "GROV", "GRV",
    "GROVES", "GRVS",
    "HARBOR", "HARB", "HARBR", "HRBOR", "HBR",
    "HARBORS", "HBRS",
    "HAVEN", "HVN",
    "HEIGHTS", "HT", "HTS",
    "HIGHWAY", "HIGHWY", "HIWAY", "HIWY", "HWAY", "HWY",
    "HILL", "HL",
    "HILLS", "HLS",
    "HOLLOW", "HLLW", "HOLLOWS", "HOLW", "HOLWS",
    "INLET", "INLT",
    "ISLAND", "ISLND", "IS",
    "ISLANDS", "ISLNDS", "ISS",
    "ISLE", "ISLES",
    "JUNCTION", "JCTION", "JCTN", "JUNCTN", "JUNCTON", "JCT",
    "JUNCTIONS", "JCTNS", "JCTS",
    "KEY", "KY",
    "KEYS", "KYS",
    "KNOLL", "KNOL", "KNL",
    "KNOLLS", "KNLS",
    "LAKE", "LK",
    "LAKES", "LKS",
    "LAND",
    "LANDING", "LNDNG", "LNDG",
    "LANE", "LN",
    "LIGHT", "LGT",
    "LIGHTS", "LGTS",
    "LOAF", "LF",
    "LOCK", "LCK",
    "LOCKS", "LCKS",
    "LODGE", "LDGE", "LODG", "LDG",
    "LOOP", "LOOPS",
    "MALL",
    "MANOR", "MNR",
    "MANORS", "MNRS",
    "MEADOW", "MDW",
    "MEADOWS", "MEDOWS", "MDWS",
    "MEWS",
    "MILL", "ML",
    "MILLS", "MLS",
    "MISSION", "MISSN", "MSSN", "MSN",
    "MOTORWAY", "MTWY",
    "MOUNT", "MNT", "MT",
    "MOUNTAIN", "MNTAIN", "MNTN", "MOUNTIN", "MTIN", "MTN",
    "MOUNTAINS", "MNTNS", "MTNS",
    "NECK", "NCK",
    "ORCHARD", "ORCHRD", "ORCH",
    "OVAL", "OVL",
    "OVERPASS", "OPAS",
    "PARK", "PRK",
    "PARKS",
    "PARKWAY", "PARKWY", "PKWAY", "PKY", "PKWY",
    "PARKWAYS", "PKWYS",
    "PASS",
    "PASSAGE", "PSGE",
    "PATH", "PATHS",
    "PIKE", "PIKES",
    "PINE", "PNE",
    "PINES", "PNES",
    "PLACE", "PL",
    "PLAIN", "PLN",
    "PLAINS", "PLNS",
    "PLAZA", "PLZA", "PLZ",
    "POINT", "PT",
    "POINTS", "PTS",
    "PORT", "PRT",
    "PORTS", "PRTS",
    "PRAIRIE", "PRR", "PR",
    "RADIAL", "RAD", "RADIEL", "RADL",
    "RAMP",
    "RANCH", "RANCHES", "RNCHS", "RNCH",
    "RAPID", "RPD",
    "RAPIDS", "RPDS",
    "REST", "RST",
    "RIDGE", "RDGE", "RDG",
    "RIDGES", "RDGS",
    "RIVER", "RVR", "RIVR", "RIV",
    "ROAD", "RD",
    "ROADS", "RDS",
    "ROUTE", "RTE",
    "ROW",
    "RUE",
    "RUN",
    "SHOAL", "SHL",
    "SHOALS", "SHLS",
    "SHORE", "SHOAR", "SHR",
    "SHORES", "SHOARS", "SHRS",
    "SKYWAY", "SKWY",
    "SPRING", "SPNG", "SPRNG", "SPG",
    "SPRINGS", "SPNGS", "SPRNGS", "SPGS",
    "SPUR", "SPURS",
    "SQUARE", "SQR", "SQRE", "SQU", "SQ",
    "SQUARES", "SQRS", "SQS",
    "STATION", "STATN", "STN", "STA",
    "STRAVENUE", "STRAV", "STRAVEN", "STRAVN", "STRVN", "STRVNUE", "STRA",
    "STREAM", "STREME", "STRM",
    "STREET", "STRT", "STR", "ST",
    "STREETS", "STS",
    "SUMMIT", "SUMIT", "SUMITT", "SMT",
    "TERRACE", "TERR", "TER",
    "THROUGHWAY", "TRWY",
    "TRACE", "TRACES", "TRCE",
    "TRACK", "TRACKS", "TRKS", "TRK",
    "TRAFFICWAY", "TRFY",
    "TRAIL", "TRAILS", "TRLS", "TRL",
    "TRAILER", "TRLRS", "TRLR",
    "TUNNEL", "TUNEL", "TUNLS", "TUNNELS", "TUNNL", "TUNL",
    "TURNPIKE", "TRNPK", "TURNPK", "TPKE",
    "UNDERPASS", "UPAS",
    "UNION", "UN",
    "UNIONS", "UNS",
    "VALLEY", "VALLY", "VLLY", "VLY",
    "VALLEYS", "VLYS",
    "VIADUCT", "VDCT", "VIADCT", "VIA",
    "VIEW", "VW",
    "VIEWS", "VWS",
    "VILLAGE", "VILL", "VILLAG", "VILLG", "VILLIAGE", "VLG",
    "VILLAGES", "VLGS",
    "VILLE", "VL",
    "VISTA", "VIST", "VST", "VSTA", "VIS",
    "WALK", "WALKS",
    "WALL",
    "WAY", "WY",
    "WAYS",
    "WELL", "WL",
    "WELLS", "WLS",
)

STREET_SUFFIXES: frozenset[str] = frozenset(_USPS_SUFFIXES)


def is_street_suffix(token: str) -> bool:
    """Check whether a token is a known street suffix.

    Args:
        token: A single whitespace-free token.

    Returns:
        True if the uppercased token is in the suffix table.
    """
    return token.upper() in STREET_SUFFIXES
