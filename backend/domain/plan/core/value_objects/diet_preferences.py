"""DietPreferences value object - foods the user has at hand."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DietPreferences:
    """Free-text food availability and preferences.

    Attributes:
        available_foods: Foods the user has or likes (may be empty)
    """

    available_foods: str = ""

    def describe(self) -> str:
        """Text for prompts, with a fallback when nothing was given."""
        foods = self.available_foods.strip()
        return foods if foods else "no restrictions, common foods"
