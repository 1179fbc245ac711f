"""Data models — connection config and query requests."""
