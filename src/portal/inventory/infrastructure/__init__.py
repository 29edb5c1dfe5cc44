"""Infrastructure layer for Inventory bounded context."""
