"""Configuration, persistence and request-context plumbing."""
