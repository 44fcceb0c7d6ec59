"""Fitness profile domain: a user's biometrics, targets and plans."""
