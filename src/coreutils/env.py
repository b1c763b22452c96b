from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def env_require(key: str) -> str:
    """Get a required environment variable, raising ValueError if it is unset."""
    value = env_get(key)
    if value is None:
        raise ValueError(f"{key} environment variable is not set")
    return value
