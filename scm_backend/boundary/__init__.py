"""Boundary adapters: database, vendor APIs and the platform API client."""
