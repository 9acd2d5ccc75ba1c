"""
API package containing routers and endpoint modules.

``router.py`` aggregates the domain routers defined in ``endpoints``;
``deps.py`` holds the dependencies shared by those endpoints.
"""
