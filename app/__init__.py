"""
Trading History Notifications — email alerts for the trading-history API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - notifications: Email subscriptions and topic-wide broadcasts via AWS SNS.

Layers:
    - domain: Entities, ports (ABCs), errors, the notification dispatcher.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SNS gateway, configuration) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, rate limiting, logging).
"""
