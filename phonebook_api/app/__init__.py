"""FastAPI application for the phonebook service."""
