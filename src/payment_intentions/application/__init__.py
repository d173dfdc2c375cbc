"""Application layer - Use cases, validation rules and port definitions.

This layer contains:
- Use Cases: Orchestration of the payment intention creation workflow
- Validation: The ordered rule chain a candidate intention must pass
- Ports: Abstract interfaces for external dependencies

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
