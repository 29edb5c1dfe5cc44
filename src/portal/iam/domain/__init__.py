"""Domain layer for IAM bounded context."""
