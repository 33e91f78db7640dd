"""Utility functions and classes for bqprovider."""
