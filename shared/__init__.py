"""
Shared utilities for the Permission Rules Service.

This package aggregates common building blocks consumed by the service
packages:

- config: Service configuration via pydantic-settings
- logging: Structured logging with correlation context
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses
- base_service: Configuration, logging and metrics bootstrap

Do not import from service_* packages into shared/.
"""
