"""
High-level use cases for the Taskboard API.

Routers call these services instead of touching a store directly. Each service
wraps one injected EntityStore and turns its not-found signals into exceptions.
"""
