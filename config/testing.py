import os

SECRET_KEY = "test-secret"

DATA_FILE = "memory://"
EXPORT_DIR = os.getenv("EXPORT_DIR") or None

LOG_LEVEL = "WARNING"
LOG_DIR = None

DEBUG = False
TESTING = True
