"""Static values shared by the server package."""

PROJECT_NAME = "SkillBridge"
API_PREFIX = "/api"
VERSION = "1.0.0"
