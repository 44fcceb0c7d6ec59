"""Application layer for fitness profiles and plans."""
