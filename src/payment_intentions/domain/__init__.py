"""Domain layer - Payment intentions, their rules and failure kinds.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., PaymentIntention)
- Value Objects: Immutable objects defined by their attributes (e.g., ValueWindow)
- Failures: The closed set of rejection kinds returned by the creation workflow
- Domain Exceptions: Errors raised across port boundaries

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
