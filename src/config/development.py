import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Answer validation
VALIDATION_AUTO_FIX = bool(int(os.getenv("VALIDATION_AUTO_FIX", "1")))
VALIDATION_THROW_ON_ERROR = bool(int(os.getenv("VALIDATION_THROW_ON_ERROR", "0")))
VALIDATION_LOG = bool(int(os.getenv("VALIDATION_LOG", "1")))
