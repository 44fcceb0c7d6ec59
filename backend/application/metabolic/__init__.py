"""Application layer for metabolic calculations."""
