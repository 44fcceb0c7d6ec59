"""Ports for the plan domain."""

from .plan_generator import IPlanGenerator

__all__ = [
    "IPlanGenerator",
]
