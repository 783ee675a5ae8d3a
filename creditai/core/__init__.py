"""Cross-cutting concerns: configuration, logging, metrics and dependency wiring."""
