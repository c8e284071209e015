"""Index schema lifecycle management for search clusters."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
