"""League and team alias tables.

The tables are overrides, not allow-lists: unknown names pass through in
normalized form and simply match nothing downstream.
"""

import re

LEAGUE_ALIASES: dict[str, str] = {
    "epl": "premier_league",
    "pl": "premier_league",
    "english_premier_league": "premier_league",
    "prem": "premier_league",
    "england": "premier_league",
    "ucl": "champions_league",
    "cl": "champions_league",
    "uefa_champions_league": "champions_league",
    "champions": "champions_league",
}

TEAM_ALIASES: dict[str, str] = {
    "manchester_united": "man_utd",
    "manchester_utd": "man_utd",
    "united": "man_utd",
    "mufc": "man_utd",
    "manchester_city": "man_city",
    "city": "man_city",
    "mcfc": "man_city",
    "nottingham_forest": "nottm_forest",
    "forest": "nottm_forest",
    "tottenham_hotspur": "tottenham",
    "spurs": "tottenham",
    "west_ham_united": "west_ham",
    "wolverhampton": "wolves",
    "brighton_hove_albion": "brighton",
    "newcastle_united": "newcastle",
    "palace": "crystal_palace",
    "gunners": "arsenal",
    "reds": "liverpool",
    "blues": "chelsea",
    "villa": "aston_villa",
    "real": "real_madrid",
    "barca": "barcelona",
    "bayern_munich": "bayern",
    "borussia_dortmund": "dortmund",
    "inter_milan": "inter",
    "paris_saint_germain": "psg",
}

_WHITESPACE = re.compile(r"\s+")


def _slug(text: str) -> str:
    return _WHITESPACE.sub("_", text.lower())


def normalize_league(text: str) -> str:
    """Map a free-form league name to its canonical identifier."""
    slug = _slug(text)
    return LEAGUE_ALIASES.get(slug, slug)


def normalize_team_name(text: str) -> str:
    """Map a free-form team name to its canonical club identifier."""
    slug = _slug(text)
    return TEAM_ALIASES.get(slug, slug)
