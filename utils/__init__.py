"""
utils/ - Shared Helpers
========================
Logging setup and identifier generation used across all layers.
"""
