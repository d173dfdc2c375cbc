"""Entrypoints layer - Translation at the delivery boundary.

This layer contains:
- Presenter: request bodies to use case input, entities to response bodies
- Error mapping: failure kinds to HTTP status codes and error bodies

Routing, schema validation and dependency wiring belong to the hosting
application; these helpers are what its handlers call.
"""
