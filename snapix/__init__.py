"""Snapix backend.

Layers:
- domain: entities, events, repository and storage ports
- application: commands, queries, handlers, dispatcher
- infrastructure: SQLAlchemy, local storage, Celery, JWT
- presentation: FastAPI routers
"""

__version__ = "1.0.0"
