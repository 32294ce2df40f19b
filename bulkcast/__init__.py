# bulkcast - Warpcast Direct Cast Batch Sender
# =============================================
# Sends one direct cast per CSV row and writes a CSV report of outcomes.
#
# ARCHITECTURE LAYERS:
# - Presentation:   CLI entry point (argument parsing, console output)
# - Application:    Campaign orchestration and progress rendering
# - Domain:         Rows, outcomes and run state (no external dependencies)
# - Infrastructure: External services (Warpcast API, CSV import, CSV report)

__version__ = "1.0.0"
