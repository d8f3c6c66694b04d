"""Services Layer — orchestrates storage calls around the pure core checks.

Invariants:
    - Services never touch HTTP objects (Request, Response, status codes)
    - Every storage call goes through a DocumentRepository

Design Decisions:
    - One service class shared by both resource kinds: projects and chatrooms
      differ only in collection and JSON wrapper key
"""
