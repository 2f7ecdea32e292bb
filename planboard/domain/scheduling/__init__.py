"""Production planning domain."""
