"""Domain enumerations for the orders API.

Enums represent fixed sets of domain values (e.g. cacheable entity types).
"""

from enum import Enum


class EntityType(str, Enum):
    """Entity types exposed by the API.

    The value is the namespace used in cache keys and in resource-not-found
    errors, so it must stay stable across releases.
    """

    ORGANIZATION = "organization"
    USER = "user"
    ORDER = "order"

    @classmethod
    def values(cls) -> list[str]:
        """Return all entity type values as strings.

        Returns:
            List of enum value strings (e.g. for validation or iteration).
        """
        return [entity.value for entity in cls]
