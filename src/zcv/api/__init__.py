"""HTTP API for the ZCV portfolio builder."""
