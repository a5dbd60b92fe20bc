"""API Client Application Layer."""
