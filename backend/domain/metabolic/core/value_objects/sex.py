"""Sex value object - biological sex used by the BMR formula."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex for the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"

    def bmr_offset(self) -> float:
        """Get the sex-specific constant added to the BMR base.

        Returns:
            float: +5 for men, -161 for women

        Example:
            >>> Sex.FEMALE.bmr_offset()
            -161.0
        """
        offsets = {
            Sex.MALE: 5.0,
            Sex.FEMALE: -161.0,
        }
        return offsets[self]
