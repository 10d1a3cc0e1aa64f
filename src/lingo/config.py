"""
Environment configuration.

Values come from the process environment, with a local .env file loaded first.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# OpenAI translation
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1")
OPENAI_MAX_OUTPUT_TOKENS = int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "3000"))
SOURCE_LANG = os.getenv("SOURCE_LANG", "German")
TARGET_LANG = os.getenv("TARGET_LANG", "English")

# Storage
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lingo.db")

# Server
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:8080").split(",")
FRONTEND_DIST = os.getenv("FRONTEND_DIST", "")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

# Client
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
POPUP_VERTICAL_GAP = int(os.getenv("POPUP_VERTICAL_GAP", "20"))
