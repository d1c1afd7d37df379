"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes all
endpoint routers; ``dependencies.py`` provides shared dependencies.
"""
