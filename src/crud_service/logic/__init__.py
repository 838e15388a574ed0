"""
Business Logic Layer Module.

This module contains the business rules for the service. It implements the
middle layer of the three-layer architecture: handlers decode requests and
build responses, the logic layer enforces validation and business rules,
and the data access layer owns storage.

Modules:
- validation: required-field and email-shape checks
- ids: identifier generation
- user_service: user management operations over an injected entity store
"""

__version__ = "1.0.0"
