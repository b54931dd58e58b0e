"""End-to-end smoke runner for a live provider-mocks server."""
