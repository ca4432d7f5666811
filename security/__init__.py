"""
security/ - Access Control
==========================
Handler decorators for the user whitelist, sign-in and rate limiting.
"""
