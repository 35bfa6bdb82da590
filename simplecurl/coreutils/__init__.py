"""
Core Utilities

Logging and environment-backed settings shared by every layer.
"""
