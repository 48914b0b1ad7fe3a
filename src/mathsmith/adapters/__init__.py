"""Output adapters for expression trees."""
