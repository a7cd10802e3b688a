"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its ``Database`` explicitly, so API handlers never reach for a global
connection.
"""
