"""Domain models, errors, URL building and payload mapping."""
