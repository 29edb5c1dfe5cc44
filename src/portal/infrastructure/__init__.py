"""Cross-cutting infrastructure: settings, logging, database access."""
