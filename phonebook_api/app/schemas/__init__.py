"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the SQL in the service layer to
decouple the API representation from persistence.
"""
