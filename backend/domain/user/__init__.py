"""User domain.

Registered accounts and the login sessions that identify the caller of
protected recipe operations.
"""
