"""Settings, logging and the in-memory user store."""
