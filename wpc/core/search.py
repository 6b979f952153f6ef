"""Fuzzy search and filtering over weapon types."""

import logging

from rapidfuzz import fuzz, process

from wpc.core.constants import WeaponCategory
from wpc.models.catalog import WeaponType, canonical_defindex

logger = logging.getLogger(__name__)


class WeaponSearcher:
    """Fuzzy search and filtering for weapon types."""

    def __init__(self, weapon_types: list[WeaponType]) -> None:
        """Index weapon types by canonical defindex."""
        self.weapon_types = weapon_types
        self._index = {
            canonical_defindex(wt.weapon_defindex): f"{wt.display_name} {wt.weapon_name}".lower()
            for wt in weapon_types
        }

    def filter_and_search(
        self,
        search_query: str | None = None,
        category: WeaponCategory | None = None,
        threshold: int = 70,
    ) -> list[WeaponType]:
        """Combined category filter and fuzzy search.

        Args:
            search_query: Optional fuzzy search query
            category: Optional category to keep
            threshold: Minimum score for fuzzy matches (0-100)

        Returns:
            Matching weapon types; ranked by score when searching, otherwise in original order
        """
        weapon_types = self.weapon_types
        if category:
            weapon_types = [wt for wt in weapon_types if wt.category == category]

        if not search_query:
            return weapon_types

        allowed = {canonical_defindex(wt.weapon_defindex): wt for wt in weapon_types}
        index = {key: text for key, text in self._index.items() if key in allowed}

        # partial_ratio finds the query as a fuzzy substring with typo tolerance
        matches = process.extract(
            search_query.lower(),
            index,
            scorer=fuzz.partial_ratio,
            score_cutoff=threshold,
            limit=None,
        )
        logger.debug(f"Search '{search_query}' matched {len(matches)} weapon types")

        # process.extract with a dict returns (value, score, key)
        return [allowed[key] for _, _, key in matches]
