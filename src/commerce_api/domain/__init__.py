"""Domain layer: resource contracts, services and the sale lifecycle."""
