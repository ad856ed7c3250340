"""Themed word lists fed to the generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .dictionary import WordDictionary


@dataclass
class Theme:
    """A labelled source of candidate words.

    ``name`` is carried through to the generated puzzle untouched.
    """

    name: str
    words: List[str] = field(default_factory=list)
    description: str = ""


NFL_TEAMS: List[str] = [
    "CARDINALS",
    "FALCONS",
    "RAVENS",
    "BILLS",
    "PANTHERS",
    "BEARS",
    "BENGALS",
    "BROWNS",
    "COWBOYS",
    "BRONCOS",
    "LIONS",
    "PACKERS",
    "TEXANS",
    "COLTS",
    "JAGUARS",
    "CHIEFS",
    "RAIDERS",
    "CHARGERS",
    "RAMS",
    "DOLPHINS",
    "VIKINGS",
    "PATRIOTS",
    "SAINTS",
    "GIANTS",
    "JETS",
    "EAGLES",
    "STEELERS",
    "NINERS",
    "SEAHAWKS",
    "BUCCANEERS",
    "TITANS",
    "COMMANDERS",
]

BUILTIN_THEMES: Dict[str, Theme] = {
    "nfl_teams": Theme(
        name="NFL Teams",
        words=NFL_TEAMS,
        description="Team nicknames from the National Football League",
    ),
}


def dictionary_theme(dictionary: WordDictionary) -> Theme:
    return Theme(
        name="Dictionary Words",
        words=dictionary.words,
        description="Words from the English dictionary",
    )


def get_theme(key: str) -> Theme:
    """Return a built-in theme by key, listing the known keys on a miss."""

    try:
        return BUILTIN_THEMES[key]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_THEMES))
        raise ValueError(f"Unknown theme '{key}'. Known themes: {known}") from None
