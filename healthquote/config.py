"""Shared configuration for the health insurance quote model.

This module centralizes environment variable access and default values
to prevent drift between modules.
"""

import os

# Logging
LOG_LEVEL = os.getenv("HEALTHQUOTE_LOG_LEVEL", "WARNING")

# Strict calendar-date format used for the policy holder's date of birth
DOB_FORMAT = os.getenv("HEALTHQUOTE_DOB_FORMAT", "%Y-%m-%d")
