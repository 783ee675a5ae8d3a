"""Infrastructure layer: adapters for data, external APIs and rendering."""
