"""
services/ - Business Logic Layer
=================================
Callers of the repositories that shape results for the API layer.
"""
