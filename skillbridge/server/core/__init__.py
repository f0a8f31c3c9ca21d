"""
Core server configuration.

Holds the settings model and the constants shared by the API routers.
"""
