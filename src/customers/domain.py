"""Customers bounded context: the Customer aggregate and its value objects."""

from protean.domain import Domain

from customers.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
customers = Domain(name="customers")
