"""
Infrastructure layer - External adapters for contract signature state.

This layer contains:
- HTTP adapter for the remote signature store
- File-backed device-local mirror
- In-process signature event bus
- Stubs for development and testing
- Observability (structured logging, correlation IDs)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
