"""Shared domain building blocks used across domains."""
