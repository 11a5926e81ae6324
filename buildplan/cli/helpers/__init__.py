"""CLI helper modules."""
