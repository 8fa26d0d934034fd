"""
Storage layer.

Repositories map bookmark identifiers to bookmarks.  Only a volatile
in‑memory implementation exists; services depend on the
``BookmarkRepository`` protocol so another backend can be swapped in
without touching them.
"""
