"""Application layer - Orchestration, event dispatch and port definitions.

This layer contains:
- Services: PaymentService, the single entry point for payment operations
- Event bus and observers: Synchronous notification after persistence
- Ports: Abstract interfaces for external dependencies
- DTOs: Data transfer objects for use case input

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
