"""Core building blocks of the fitness profile domain."""
