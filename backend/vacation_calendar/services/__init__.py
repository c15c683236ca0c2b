from . import calendar_service

__all__ = [
    "calendar_service",
]
