"""
Service layer.

Services encapsulate the SQL for a domain so that API handlers never
touch the database directly.
"""
