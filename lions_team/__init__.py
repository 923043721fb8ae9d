"""Lions basketball team hub: storage layer and HTTP API."""
