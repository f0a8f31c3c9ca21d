"""
SkillBridge HTTP server.

Run with ``uvicorn skillbridge.server.main:app``.
"""
