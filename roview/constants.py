"""Shared constants for the roview home directory and logging."""

ROVIEW_HOME_EXT = ".roview"  # user-level config directory suffix

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_FILE_NAME = "roview.log"
