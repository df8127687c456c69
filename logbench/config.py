"""Defaults for a benchmark run. Every value can be overridden from the command line."""

# Configuration
DEFAULT_ITERATIONS = 5
PROGRESS_EVERY = 10000

DEFAULT_DSN = "postgresql://localhost/log_db"
DEFAULT_LOG_FILE = "my_simple_log_file"
DEFAULT_SQLITE_FILE = "log_db.sqlite3"
DEFAULT_IMAGES_DIR = "images"

LOG_MESSAGE = "user made a request"

# Backend names, in measurement order
BACKEND_RDBMS_NO_ID = "rdbms_no_id"
BACKEND_RDBMS = "rdbms"
BACKEND_FILE = "file"
BACKEND_SQLITE = "sqlite"
ALL_BACKENDS = [BACKEND_RDBMS_NO_ID, BACKEND_RDBMS, BACKEND_FILE, BACKEND_SQLITE]

# Series overlaid against rdbms and file in a comparison chart
COMPARISON_BACKENDS = [BACKEND_RDBMS_NO_ID, BACKEND_SQLITE]

# Charts
CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 800
CHART_DPI = 100
RDBMS_COLOR = "green"
FILE_COLOR = "red"
OTHER_COLOR = "blue"
