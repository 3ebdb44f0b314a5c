"""HTTP and WebSocket host for a single game session."""
