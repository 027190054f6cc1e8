"""Domain model for the launch catalog."""

from __future__ import annotations

from .enums import Precision, UpdateStatus
from .launch import Launch, LaunchSite

__all__ = [
    "Launch",
    "LaunchSite",
    "Precision",
    "UpdateStatus",
]
