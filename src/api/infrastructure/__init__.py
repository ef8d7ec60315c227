"""Process-wide infrastructure: settings, logging and version metadata."""
