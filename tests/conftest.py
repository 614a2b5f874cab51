"""Root pytest configuration for all tests."""

import logging

# urllib3 logs every connection at DEBUG; keep test output readable when
# the gis_docs logger is configured verbosely.
logging.getLogger("urllib3").setLevel(logging.WARNING)
