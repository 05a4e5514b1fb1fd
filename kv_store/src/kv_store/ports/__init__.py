"""Ports layer - interfaces for the store and its collaborators."""
