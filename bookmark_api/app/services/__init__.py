"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive their repository through the constructor, so API handlers and
tests decide which storage backs them.
"""
