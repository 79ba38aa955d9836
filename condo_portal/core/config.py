"""Configuration settings for the condo resident portal API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_STR: API path prefix shared by all endpoints
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root logging level name
        CORS_ORIGINS: Origins allowed to call the API from a browser
        MAINTENANCE_LEAD_DAYS: Calendar days between a request and its scheduled date
        MAX_ISSUE_SUBJECT_LENGTH: Upper bound on a maintenance task title
    """
    def __init__(self):
        self.API_STR = "/api"
        self.PROJECT_NAME = "Condo Resident Portal API"
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Browser client settings
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Maintenance scheduling
        self.MAINTENANCE_LEAD_DAYS = 5
        self.MAX_ISSUE_SUBJECT_LENGTH = 200


settings = Settings()
