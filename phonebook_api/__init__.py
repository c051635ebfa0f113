"""Phonebook API package.

Contains the FastAPI application (``phonebook_api.app``) that serves
contacts stored in a local SQLite file.
"""
