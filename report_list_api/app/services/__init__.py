"""
Service layer abstraction.

Services encapsulate the business logic behind the API handlers.  The
report store is in memory for now; swapping it for a database only
touches this package.
"""
