"""
Core building blocks of the SkillBridge API.

Contains logging and monitoring setup, security helpers, the database layer
and the shared model definitions.
"""
