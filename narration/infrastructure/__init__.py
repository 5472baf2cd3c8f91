"""Infrastructure layer: text chunking and provider services."""
