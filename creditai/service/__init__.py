"""Pure scoring engine packages."""
