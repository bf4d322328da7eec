"""
Domain Layer

This package contains the core business domain objects, separated from
persistence concerns and infrastructure.

Structure:
- entities/: Business entities with identity and lifecycle
"""
