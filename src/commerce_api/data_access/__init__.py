"""Persistence: engine bootstrap, table models, unit of work and filters."""
