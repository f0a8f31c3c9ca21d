"""
Model definitions shared across the application.

- domain: enums describing roles and lifecycle states
- io: request and response schemas used by the API layer
"""
