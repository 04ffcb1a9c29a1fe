import os
from dotenv import load_dotenv


def _int_env(key, default):
    value = os.environ.get(key)
    return int(value) if value else default


class Config:
    """Process-wide settings, read from the environment (and a .env file) once."""

    def __init__(self):
        load_dotenv()
        self.MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017")
        self.DB_NAME = os.environ.get("DB_NAME", "classmate")
        self.BACKEND_URL = os.environ.get("BACKEND_URL", "http://localhost:8000")
        self.FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
        self.UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
        self.MONGO_CONNECT_TIMEOUT_MS = _int_env("MONGO_CONNECT_TIMEOUT_MS", 5000)
        self.MONGO_SOCKET_TIMEOUT_MS = _int_env("MONGO_SOCKET_TIMEOUT_MS", 30000)
        self.MAX_CONTENT_LENGTH = _int_env("MAX_CONTENT_LENGTH", 16 * 1024 * 1024)
        self.PORT = _int_env("PORT", 8000)
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def load_config():
    return Config()
