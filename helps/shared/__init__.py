"""
Shared module package.

Contains cross-cutting concerns used by every route:
- Correlated error reporting
- Security middleware
- Rate limiting
- Logging configuration
"""
