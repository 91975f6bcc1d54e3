"""
Application Constants
Defines constant values used throughout the application.

This module contains all application-wide constants including:
- Chat message roles
- Disease names analysed by the insight engine
- Risk trends
- Medical report types offered by the upload form
- Supported languages
"""

# Chat Message Roles
ROLE_USER = "user"  # Message typed by the patient
ROLE_ASSISTANT = "assistant"  # Canned reply from the chat responder

# Diseases covered by the impact analysis (generation order)
DISEASE_CARDIOVASCULAR = "Cardiovascular Disease"
DISEASE_TYPE_2_DIABETES = "Type 2 Diabetes"
DISEASE_HYPERTENSION = "Hypertension"

ANALYSED_DISEASES = [
    DISEASE_CARDIOVASCULAR,
    DISEASE_TYPE_2_DIABETES,
    DISEASE_HYPERTENSION
]

# Risk Trends
TREND_IMPROVING = "improving"  # Habits are lowering the risk
TREND_WORSENING = "worsening"  # Habits are raising the risk
TREND_STABLE = "stable"  # No clear direction

# Medical Report Types (upload form choices, free strings are accepted too)
REPORT_TYPES = [
    "Blood Test",
    "X-Ray",
    "MRI Scan",
    "CT Scan",
    "Ultrasound",
    "ECG",
    "Pathology Report",
    "Prescription",
    "Other",
]

# Placeholder storage prefix for uploaded report files
REPORT_FILE_URL_PREFIX = "placeholder-url"

# Languages
LANGUAGE_ENGLISH = "en"
LANGUAGE_HINDI = "hi"

SUPPORTED_LANGUAGES = [LANGUAGE_ENGLISH, LANGUAGE_HINDI]

# Pagination
DEFAULT_PAGE_SIZE = 50  # Default number of items per page
MAX_PAGE_SIZE = 100  # Maximum items per page
