"""Ports (interfaces) for IAM bounded context."""
