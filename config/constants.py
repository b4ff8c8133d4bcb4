"""
TapWatch · Constants and Provider Endpoints

Fixed upstream endpoints, decoding tables and user-facing messages.
- EWG Tap Water Database (via the Waterdrop API): systems by zip, contaminants by PWSID
- EPA Envirofacts SDWIS: WATER_SYSTEM facility records by PWSID
"""

# =============================================================================
# API Endpoints
# =============================================================================
EWG_SYSTEMS_URL = "https://ewgapi.waterdropfilter.com/zip_systems"
EWG_INFORMATION_URL = "https://ewgapi.waterdropfilter.com/information"
EPA_WATER_SYSTEM_URL = "https://data.epa.gov/efservice/WATER_SYSTEM/PWSID/{pwsid}/json"

# Gateway routes (relative to TAPWATCH_GATEWAY_URL)
GATEWAY_ROUTES = {
    "systems": "/get-systems",
    "contaminants": "/get-contaminants",
    "facility": "/get-epa-data",
}

DEFAULT_TIMEOUT_SECONDS = 30.0

# =============================================================================
# SDWIS primary source codes
# Source: EPA SDWIS/FED data dictionary, WATER_SYSTEM.PRIMARY_SOURCE_CODE
# =============================================================================
SOURCE_WATER_TYPES = {
    "GW": "Groundwater",
    "SW": "Surface Water",
    "GU": "Groundwater Under Direct Influence of Surface Water",
    "C": "Consecutive Connection",
}

NOT_AVAILABLE = "N/A"

# =============================================================================
# Upstream record fields
# =============================================================================
SYSTEM_FIELDS = {
    "list": "systemList",
    "id": "PWS",
    "name": "SystemName",
}

CONTAMINANT_FIELDS = {
    "name": "ContaminantName",
    "effect": "ContaminantEffect",
    "units": "ContaminantDisplayUnits",
    "average": "SystemAverage",
    "guideline": "ContaminantHGValue",
    "legal_limit": "ContaminantMCLValue",
}

FACILITY_FIELDS = {
    "population": "population_served_count",
    "source": "primary_source_code",
}

# =============================================================================
# User-visible messages
# =============================================================================
MESSAGES = {
    "missing_zip": "Please enter a valid zip code.",
    "no_systems": "No water systems found for zip code {zip_code}. "
                  "Please check the zip code and try again.",
    "error": "An error occurred while fetching the report. Please try again later.",
    "no_contaminants": "No contaminant data found for {system_name}. "
                       "This may mean the water is clean, or data is unavailable.",
}

GATEWAY_ERRORS = {
    "missing_zip": "Zip code is required",
    "missing_pwsid": "PWSID is required",
    "systems": "Failed to fetch systems data",
    "contaminants": "Failed to fetch contaminants data",
    "facility": "Failed to fetch EPA Envirofacts data",
    "facility_status": "Failed to fetch EPA data: {reason}",
}

# =============================================================================
# Display colours
# =============================================================================
STATUS_COLORS = {
    "exceeds": "#e74c3c",
    "others": "#2ecc71",
    "neutral": "#3498db",
}
