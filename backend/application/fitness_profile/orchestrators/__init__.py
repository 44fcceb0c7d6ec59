"""Orchestrators for fitness profile workflows."""

from .plan_orchestrator import PlanOrchestrator

__all__ = [
    "PlanOrchestrator",
]
