"""Date and root-finding helpers shared by the schedule and valuation packages."""
