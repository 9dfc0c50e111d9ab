import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

VALIDATION_AUTO_FIX = True
VALIDATION_THROW_ON_ERROR = False
VALIDATION_LOG = True
