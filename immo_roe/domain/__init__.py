"""Domain models and pure calculators."""
