"""Adapters — framework-specific edges around the domain."""
