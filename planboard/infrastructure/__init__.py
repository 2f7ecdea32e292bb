"""Infrastructure adapters for the planning board."""
