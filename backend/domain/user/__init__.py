"""User domain module.

This domain manages account identity: user records, their companion balance
and preset documents, password verification and session tokens.
"""
