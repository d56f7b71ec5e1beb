"""
API package containing the HTTP routes.

``router.router`` includes every endpoint module and is mounted by
``main.create_app``.
"""
