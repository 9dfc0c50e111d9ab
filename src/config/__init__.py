import os

SETTINGS_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # ATTENDANCE_QA_ENV wins over the shared APP_ENV; anything unknown means development
    env = os.getenv("ATTENDANCE_QA_ENV") or os.getenv("APP_ENV", "development")
    return SETTINGS_MODULES.get(env.strip().lower(), "config.development")
