"""Plan domain: weekly diet and workout plans."""
