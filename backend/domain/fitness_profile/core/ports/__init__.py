"""Ports for the fitness profile domain."""

from .repository import IFitnessProfileRepository

__all__ = [
    "IFitnessProfileRepository",
]
