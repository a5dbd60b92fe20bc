"""API Client Infrastructure Layer."""
