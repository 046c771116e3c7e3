"""Infrastructure layer: configuration, logging and the record store."""
