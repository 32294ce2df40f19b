from .settings import Settings, WarpcastSettings, DEFAULT_OUTPUT_FILE

__all__ = ["Settings", "WarpcastSettings", "DEFAULT_OUTPUT_FILE"]
