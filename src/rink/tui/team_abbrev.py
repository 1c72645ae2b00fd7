"""Team abbreviation <-> common name lookups."""

from __future__ import annotations

_COMMON_NAMES: dict[str, str] = {
    "ANA": "Ducks",
    "ARI": "Coyotes",
    "BOS": "Bruins",
    "BUF": "Sabres",
    "CGY": "Flames",
    "CAR": "Hurricanes",
    "CHI": "Blackhawks",
    "COL": "Avalanche",
    "CBJ": "Blue Jackets",
    "DAL": "Stars",
    "DET": "Red Wings",
    "EDM": "Oilers",
    "FLA": "Panthers",
    "LAK": "Kings",
    "MIN": "Wild",
    "MTL": "Canadiens",
    "NSH": "Predators",
    "NJD": "Devils",
    "NYI": "Islanders",
    "NYR": "Rangers",
    "OTT": "Senators",
    "PHI": "Flyers",
    "PIT": "Penguins",
    "SJS": "Sharks",
    "SEA": "Kraken",
    "STL": "Blues",
    "TBL": "Lightning",
    "TOR": "Maple Leafs",
    "VAN": "Canucks",
    "VGK": "Golden Knights",
    "WSH": "Capitals",
    "WPG": "Jets",
    "UTA": "Hockey Club",
    # Historical
    "PHX": "Phoenix Coyotes",
    "ATL": "Atlanta Thrashers",
}

_ABBREVS: dict[str, str] = {name: abbrev for abbrev, name in _COMMON_NAMES.items()}


def abbrev_to_common_name(abbrev: str) -> str | None:
    return _COMMON_NAMES.get(abbrev)


def common_name_to_abbrev(common_name: str) -> str | None:
    return _ABBREVS.get(common_name)
