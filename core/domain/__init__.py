"""Domain layer - pure domain models, errors and value types."""
