"""Infrastructure adapters - production implementations of application ports."""
