"""Default configuration values and file content."""

from podexplorer.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()


def get_default_config_content() -> str:
    """Commented config.yaml written on first run."""
    return """\
# Podexplorer configuration
version: "1"

# Root of the podcast catalog API (shows at /shows, details at /id/<id>)
catalog_base_url: https://podcast-api.netlify.app

# Request timeout in seconds; null uses the transport default
request_timeout: null

# Listing defaults
page_size: 12
default_sort: newest  # newest, oldest, title-asc, title-desc

# Logging
log_level: WARNING

# Optional YAML file replacing the built-in genre list
genres_file: null
"""
