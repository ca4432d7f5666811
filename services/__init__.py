"""
services/ - Business Logic
==========================
Aggregation, pricing, export, insights, payments and the transaction store.
Services call repositories and external APIs; handlers call services.
"""
