import os
import logging


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Default entry seeded into every user menu
LOGOUT_URL = os.getenv("LOGOUT_URL", "/logout")
LOGOUT_LABEL = os.getenv("LOGOUT_LABEL", "Sign out")

# Base path used by MenuItem.resource() and MenuItem.filter()
ADMIN_RESOURCES_PATH = os.getenv("ADMIN_RESOURCES_PATH", "/admin/resources").rstrip("/")


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

logger = logging.getLogger("admin_navigation")
