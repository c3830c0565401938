"""Cross-cutting pieces: settings, logging and error types."""
