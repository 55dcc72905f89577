"""Spanish voice lighting control server."""
