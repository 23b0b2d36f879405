"""Application layer - ports and DTOs."""
