import logging
import sys

def setup_logging():
    """
    Configure structured logging for the application.

    Sets up logging to stdout with timestamps, log levels, and module names.
    Tenant resolution, routing and CRUD activity all go through this logger.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Reduce SQLAlchemy noise in logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return logging.getLogger("storefront")


# Create global logger instance
logger = setup_logging()
