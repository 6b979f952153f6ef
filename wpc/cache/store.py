"""Local store for saved customizations using DiskCache."""

import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from wpc.cache.base import BaseCacheManager
from wpc.exceptions import StoreError
from wpc.models.customization import PersistedCustomization

logger = logging.getLogger(__name__)


class CustomizationStore(BaseCacheManager[PersistedCustomization]):
    """Saves and loads customization records for one profile."""

    def __init__(self, root_dir: Path, profile: str) -> None:
        """Initialize store for a profile."""
        super().__init__(root_dir, profile, cache_subdir="customizations")

    @staticmethod
    def _generate_cache_key(record: PersistedCustomization) -> str:
        """Build the key for a record from its (defindex, team, paint id) identity."""
        defindex, team, paint_id = record.key
        return f"{defindex}_{team}_{paint_id}"

    def save(self, data: PersistedCustomization) -> None:
        """Save a record, replacing any earlier record with the same identity.

        Args:
            data: Record produced by the codec

        Raises:
            StoreError: If the record could not be written
        """
        cache_key = self._generate_cache_key(data)
        try:
            self.cache.set(cache_key, data.to_payload())
        except Exception as e:
            logger.error(f"Error saving customization {cache_key}: {e}")
            raise StoreError(f"Could not save customization {cache_key}", {"key": cache_key}) from e
        logger.debug(f"Saved customization {cache_key} ({data.type})")

    def load_all(self) -> list[PersistedCustomization]:
        """Load every saved record for this profile.

        Returns:
            Saved records; unreadable rows are skipped
        """
        records = []
        for key, payload in self._iter_raw():
            try:
                records.append(PersistedCustomization.model_validate(payload))
            except PydanticValidationError as e:
                logger.debug(f"Skipping unreadable customization {key}: {e}")
        return records

    def delete(self, record: PersistedCustomization) -> bool:
        """Delete the saved record with the same identity as ``record``."""
        return self.delete_item(self._generate_cache_key(record))
