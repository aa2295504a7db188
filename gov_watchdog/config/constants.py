"""
Application-wide constants.

API endpoints, page sizes, and other magic numbers live here.
"""

# API Base URLs
CONGRESS_GOV_BASE_URL = "https://api.congress.gov/v3"
PROPUBLICA_BASE_URL = "https://api.propublica.org/congress/v1"
OPENSECRETS_BASE_URL = "https://www.opensecrets.org/api/"
USASPENDING_BASE_URL = "https://api.usaspending.gov/api/v2"

# ProPublica member lists are pinned to a single Congress
PROPUBLICA_CONGRESS = 118
PROPUBLICA_CHAMBERS = ("house", "senate")

# Page sizes
MEMBER_PAGE_LIMIT = 250
BILL_PAGE_LIMIT = 50
SPENDING_RESULT_LIMIT = 100

# Congress.gov sort order for the bill feed (newest updates first)
BILL_SORT = "updateDate desc"

# OpenSecrets
OPENSECRETS_LOBBYING_METHOD = "getLobbyingForClient"
LOBBYING_REPORT_TYPE = "Annual"

# USAspending grouping for the spending explorer endpoint
SPENDING_CATEGORY = "awarding_agency"
