"""Utility functions for ipfskit."""
