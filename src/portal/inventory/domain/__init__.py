"""Domain layer for Inventory bounded context."""
