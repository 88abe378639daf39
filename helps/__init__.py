"""
helps: minimal HTTP service skeleton.

Application package root. Three placeholder routes plus one reusable
facility: correlated error reporting, which keeps internal failure detail
in the server log and shows clients only a rendered message and an error id.

Layers:
    - core: Configuration.
    - interfaces: FastAPI route handlers.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
