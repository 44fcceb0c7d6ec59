"""Core building blocks of the metabolic domain."""
