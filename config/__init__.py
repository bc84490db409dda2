import os
from typing import Optional

_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted path of the settings module for ``env`` (default: $APP_ENV).

    Anything unrecognised falls back to development settings.
    """
    name = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return f"config.{_ALIASES.get(name, 'development')}"
