"""
Service-wide constants
"""

SERVICE_NAME = "agency-backend"
DEFAULT_VERSION = "1.0.0"
