"""
utils/ - Shared Helpers
=======================
Logging setup and the application exception hierarchy.
"""
