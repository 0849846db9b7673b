"""Infrastructure layer - storage, reports and import adapters."""
