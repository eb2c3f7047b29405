"""Send one FCM HTTP v1 push notification to a single device token."""

__all__ = [
    "build_message",
    "build_override_message",
    "fetch_access_token",
    "load_service_account",
    "send_message",
    "settings_for",
]

__version__ = "0.1.0"

from .config import settings_for
from .credentials import load_service_account
from .delivery import send_message
from .message import build_message, build_override_message
from .oauth import fetch_access_token
