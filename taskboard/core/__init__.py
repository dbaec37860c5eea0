"""
Core utilities shared across the Taskboard API.

This package hosts configuration (env vars, data paths) and logging setup.
Routers, services and stores depend on these primitives instead of reading the
environment themselves.
"""
