"""Cross-cutting infrastructure: configuration, logging, database, cookies and media types."""
