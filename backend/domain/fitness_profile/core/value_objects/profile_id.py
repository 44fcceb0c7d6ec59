"""ProfileId value object - unique identifier for fitness profiles."""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ProfileId:
    """Unique identifier for a fitness profile."""

    value: UUID

    @staticmethod
    def generate() -> "ProfileId":
        """Generate a new unique profile ID."""
        return ProfileId(value=uuid4())

    @staticmethod
    def from_string(id_str: str) -> "ProfileId":
        """Create ProfileId from string representation.

        Raises:
            ValueError: If string is not a valid UUID
        """
        try:
            return ProfileId(value=UUID(id_str))
        except ValueError as e:
            raise ValueError(f"Invalid profile ID format: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
