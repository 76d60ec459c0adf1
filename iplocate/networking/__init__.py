"""Networking helpers - HTTP transport shared by the client."""
