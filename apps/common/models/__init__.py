"""
Common models module.
"""
from .audit import AdminAuditLog

__all__ = [
    'AdminAuditLog',
]
