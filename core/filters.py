"""Stream filtering by title terms, language and excluded channels."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence, Set
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.entry import StreamEntry

# Anything that is not a letter separates words
_WORD_SPLIT = re.compile(r"[^\W\d_]+")


def title_words(title: str) -> list[str]:
    """Split a lowercased title into its alphabetic words."""
    return _WORD_SPLIT.findall(title.lower())


def matches(
    entry: StreamEntry,
    whole_word: bool,
    match_all: bool,
    terms: Sequence[str],
    excluded_names: Set[str],
    lang: str | None,
) -> bool:
    """Decide whether an entry should be displayed.

    Checks run in order and stop at the first decisive one: excluded channel,
    language, then the title terms. Terms are compared case-insensitively in
    both whole-word and substring mode. An empty term is a substring of every
    title, so ``[""]`` matches everything in substring mode.

    Args:
        entry: Stream to test.
        whole_word: Require a term to equal a whole word of the title.
        match_all: Require every term instead of any (substring mode only).
        terms: Search terms.
        excluded_names: Lowercase channel names that never match.
        lang: Language code the stream must have, None for any.

    Returns:
        True if the entry passes every check.
    """
    if entry.display_name.lower() in excluded_names:
        return False

    if lang and entry.language != lang:
        return False

    lowered_terms = [t.lower() for t in terms]

    if whole_word:
        words = set(title_words(entry.title))
        return any(t in words for t in lowered_terms)

    lower_title = entry.title.lower()
    if match_all:
        return all(t in lower_title for t in lowered_terms)
    return any(t in lower_title for t in lowered_terms)


def build_exclusions(
    cli_names: Iterable[str] | None = None,
    ignore_list: Iterable[str] | None = None,
) -> frozenset[str]:
    """Merge excluded channel names from the command line and configuration.

    Each value may itself be a comma-separated list. Names are lowercased and
    blanks are dropped.
    """
    names: set[str] = set()
    for source in (cli_names or (), ignore_list or ()):
        for item in source:
            for name in item.split(","):
                name = name.strip().lower()
                if name:
                    names.add(name)
    return frozenset(names)


@dataclass(frozen=True)
class SearchCriteria:
    """Everything the filter needs to judge a stream."""

    terms: tuple[str, ...] = ("",)
    excluded_names: frozenset[str] = field(default_factory=frozenset)
    lang: str | None = None
    match_all: bool = False
    whole_word: bool = False

    def accepts(self, entry: StreamEntry) -> bool:
        return matches(
            entry,
            self.whole_word,
            self.match_all,
            self.terms,
            self.excluded_names,
            self.lang,
        )
