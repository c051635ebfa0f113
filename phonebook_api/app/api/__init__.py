"""
HTTP routes.

``router.py`` aggregates the routers defined in ``endpoints`` and is
included by the application factory at the root path.
"""
