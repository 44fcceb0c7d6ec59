"""Domain layer for fitness onboarding.

This package holds the business logic (metabolic calculations, plans and
the fitness profile aggregate), decoupled from the GraphQL presentation
and from infrastructure.
"""
