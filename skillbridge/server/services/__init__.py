"""
Service layer for the SkillBridge API.

Authentication dependencies, the booking status rules, rating maintenance,
admin reporting and the assembly of response views live here so that the
routers stay thin.
"""
