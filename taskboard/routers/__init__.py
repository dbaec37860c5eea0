"""
FastAPI routers grouped by resource (tasks, projects, milestones).

Each module exposes an APIRouter included by app.create_app(). Routers pull
their service from ``request.app.state`` so tests can inject any backend.
"""
