"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
STORES = ("sql", "memory")


class Settings:
    ENV: str
    DATABASE_URL: str
    STUDENT_STORE: str
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    HOST: str
    PORT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'students.db'}")
        self.STUDENT_STORE = os.getenv("STUDENT_STORE", "sql").lower()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = int(os.getenv("PORT", "8080"))
        self._validate()

    def _validate(self):
        if self.STUDENT_STORE not in STORES:
            raise RuntimeError(f"STUDENT_STORE must be one of {', '.join(STORES)}, got {self.STUDENT_STORE!r}")
        # records in the memory store vanish on restart
        if self.STUDENT_STORE == "memory" and self.ENV != "dev":
            raise RuntimeError("STUDENT_STORE=memory is only allowed when ENV=dev")


settings = Settings()
