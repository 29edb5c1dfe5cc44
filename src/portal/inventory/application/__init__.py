"""Application layer for Inventory bounded context."""
