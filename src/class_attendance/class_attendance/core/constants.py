"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"

CLASS_ID_PREFIX = "class"
STUDENT_ID_PREFIX = "student"

CSV_HEADER = "Name,Present,Total,Percent"
CSV_MIME_TYPE = "text/csv"
CSV_SHARE_TITLE = "Share attendance CSV"

LOG_FORMAT = "%(asctime)s - [%(name)s] - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

MEMORY_DATA_FILE = "memory://"
