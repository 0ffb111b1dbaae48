"""Job portal API."""
