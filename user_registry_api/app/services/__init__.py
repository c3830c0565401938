"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Handlers in
``api/v1/endpoints`` parse the request and delegate to a service; the
service owns the data and raises ``core.errors`` exceptions when a
request cannot be satisfied.
"""
