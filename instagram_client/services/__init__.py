"""
Service layer modules orchestrate domain workflows (profile, media, export)
on top of the lower-level client adapters.
"""

__all__ = [
    "account_service",
    "media_service",
    "export_service",
]
