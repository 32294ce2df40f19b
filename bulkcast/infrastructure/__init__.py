# Infrastructure Layer
# ====================
# Contains all external integrations:
# - warpcast/: HTTP client for the direct cast endpoint
# - importer/: recipient CSV reader
# - reporting/: outcome collection and CSV report writer
# - config/: run settings
