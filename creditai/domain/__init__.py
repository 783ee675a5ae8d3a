"""Domain layer: exceptions, entities and interfaces shared across the service."""
