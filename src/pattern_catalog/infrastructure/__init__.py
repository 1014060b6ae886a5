"""Infrastructure package - console output, logging, registry and error handling."""
