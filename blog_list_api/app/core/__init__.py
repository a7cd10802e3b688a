"""
Core infrastructure: configuration, logging, persistence, security
and the error types shared by services and endpoints.
"""
