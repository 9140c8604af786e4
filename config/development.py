import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Whole dataset lives in this JSON file; "memory://" keeps it in memory only
DATA_FILE = os.getenv("DATA_FILE", "data/attendance.json")

# Where exported CSV files are written before they are shared
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_DIR = os.getenv("LOG_DIR", "logs")

DEBUG = True
