"""Gov Watchdog - fetch and normalize federal legislator, bill, lobbying and spending data."""

from gov_watchdog.service import GovernmentDataService, get_government_service

__version__ = "0.1.0"

__all__ = ["GovernmentDataService", "get_government_service", "__version__"]
