import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

VALIDATION_AUTO_FIX = bool(int(os.getenv("VALIDATION_AUTO_FIX", "1")))
VALIDATION_THROW_ON_ERROR = bool(int(os.getenv("VALIDATION_THROW_ON_ERROR", "0")))
VALIDATION_LOG = bool(int(os.getenv("VALIDATION_LOG", "0")))
