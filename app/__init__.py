"""Votematch application layer - models, repositories, services."""
