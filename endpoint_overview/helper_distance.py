"""Similarity between snake_case endpoint names and HelixClient helper names."""

from rapidfuzz.distance import Levenshtein

# Helpers are often named after the lookup key they take.
IGNORED_PHRASES = (
    "in_channel",
    "by_id",
    "from_ids",
    "from_id",
    "from_logins",
    "from_login",
)

TOKEN_WEIGHT = 2
MAX_HELPER_DISTANCE = 3


def _depluralize(token: str) -> str:
    if token.endswith("s") and len(token) > 1:
        return token[:-1]
    return token


def _tokens(name: str) -> list[str]:
    for phrase in IGNORED_PHRASES:
        name = name.replace(phrase, "_")
    return [_depluralize(t) for t in name.split("_") if t]


def helper_distance(endpoint: str, helper: str) -> int:
    """Token-weighted edit distance between an endpoint and a helper name.

    Both names are split on '_' after dropping the lookup phrases above, and
    every token loses a trailing 's'. Tokens at the same position cost their
    Levenshtein distance, tokens only one side has cost their length; both are
    weighted by TOKEN_WEIGHT. For example `get_games` and `get_games_by_id`
    are 0 apart, `get_clips` and `get_vips_in_channel` 4.
    """
    src = _tokens(endpoint)
    tar = _tokens(helper)
    shared = min(len(src), len(tar))
    distance = sum(
        TOKEN_WEIGHT * Levenshtein.distance(a, b)
        for a, b in zip(src[:shared], tar[:shared])
        if a != b
    )
    distance += sum(TOKEN_WEIGHT * len(t) for t in src[shared:] + tar[shared:])
    return distance
