"""Core building blocks of the plan domain."""
