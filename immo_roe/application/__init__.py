"""Application layer: simulation engine and scenario service."""
