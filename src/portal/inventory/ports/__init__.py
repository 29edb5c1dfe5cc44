"""Ports (interfaces) for Inventory bounded context."""
