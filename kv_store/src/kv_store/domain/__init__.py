"""Domain layer - the store, its enumerator and value objects."""
