"""Infrastructure adapters for plan generation."""
