"""
db/ - Database Layer
====================
PostgreSQL connection pool and schema creation for users and transactions.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
