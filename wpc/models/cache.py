"""Cache-related data models."""

from pydantic import BaseModel, Field


class CacheStatusInfo(BaseModel):
    """Model for catalog cache status information."""

    last_updated: float = 0.0
    is_valid: bool = False
    sizes: dict[str, int] = Field(default_factory=dict)

    @property
    def total_items(self) -> int:
        """Number of cached entries across all families."""
        return sum(self.sizes.values())
