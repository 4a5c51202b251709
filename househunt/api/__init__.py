"""HTTP API for the tracker UI."""
