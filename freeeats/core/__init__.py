"""
Core package: exceptions, logging, middleware and security.
"""
