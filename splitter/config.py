import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    # expose exception messages in 500 responses
    DEBUG = _flag("APP_DEBUG")
    # server-wide default when a request does not choose
    SKIP_UNKNOWN_MEMBERS = _flag("SPLIT_SKIP_UNKNOWN_MEMBERS")

config = Config()
