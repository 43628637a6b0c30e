"""Decision endpoints."""
