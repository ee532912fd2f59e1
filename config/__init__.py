import importlib
import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, default is development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def load_settings(module_name: str | None = None) -> dict:
    """Upper-case names of a settings module as a plain dict."""
    settings = importlib.import_module(module_name or get_settings_module())
    return {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
