"""
Application package initializer.

The application is layered: ``models`` holds the bookmark entity and
its validation rules, ``repositories`` the in‑memory store,
``services`` the business logic and ``api`` the HTTP routes.  The
``core`` subpackage carries configuration, logging and the error
taxonomy shared by every layer.
"""
