"""
models/ - Domain Models
=======================
Plain dataclasses and enums: transactions, plans, users, currencies and
the per-user application state. No I/O happens here.
"""
