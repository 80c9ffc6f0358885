"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- security: Password hashing, session tokens and the session cookie
"""
