"""API views - thin layer over services."""
