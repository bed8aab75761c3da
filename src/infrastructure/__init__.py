"""Infrastructure layer - Adapters and background workers.

This layer contains implementations of domain protocols (ports):
- cache/: Redis cache store, key taxonomy, cache-aside helper
- events/: In-memory event bus and side-effect handlers
- email/: Notification transports (SES, stub) and templates
- jobs/: Notification queue/worker, reconciliation workers, runtime
- persistence/: In-memory repositories for development wiring and tests
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
