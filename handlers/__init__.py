"""
handlers/ - Presentation Layer
================================
Telegram commands for the FinSight dashboard. A handler parses the command
arguments, calls a service and replies; the per-user session, state and
live dashboard live in `context.user_data` (see handlers.common).
"""
