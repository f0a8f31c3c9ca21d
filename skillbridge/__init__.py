"""SkillBridge.

Backend for a tutoring marketplace: students find tutors, book sessions and
leave reviews; tutors manage their profile and bookings; admins moderate users
and categories.

Subpackages
-----------

- ``skillbridge.core``: persistence (SQLModel entities and async
  repositories), request/response models, security helpers, logging and
  monitoring.
- ``skillbridge.server``: the FastAPI application, its routers, services,
  exception handlers and middleware.
"""
