"""
HTTP routes of the application.

``router.router`` aggregates the domain routers (health, login, events,
participants) and is mounted by ``main.create_app`` under
``Settings.api_prefix``.  ``router.root_router`` carries the routes that
live outside the prefix.
"""
