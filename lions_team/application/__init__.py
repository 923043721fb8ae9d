"""Application layer: storage ports, request schemas and HTTP handlers."""
