"""
Audit logging for admin content changes.

Every admin mutation of pricing data is recorded with a field level diff.
Failures to write the audit row are logged and never propagate to the caller.
"""
import logging
import uuid
from datetime import date, datetime

from django.db import DatabaseError

from .utils import get_client_ip

audit_logger = logging.getLogger('audit')


def _json_value(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


def snapshot(instance, fields):
    """Capture the JSON-safe values of ``fields`` on a model instance."""
    return {field: _json_value(getattr(instance, field)) for field in fields}


def diff_changes(before, after):
    """
    Compare two snapshots and return ``{field: {'before': x, 'after': y}}``
    for every field whose value differs.
    """
    before = before or {}
    after = after or {}
    changes = {}
    for field in sorted(set(before) | set(after)):
        old_value = before.get(field)
        new_value = after.get(field)
        if old_value != new_value:
            changes[field] = {'before': old_value, 'after': new_value}
    return changes


class AuditService:
    """Writes AdminAuditLog rows for admin actions"""

    @staticmethod
    def log(request, action, entity_type, entity_id, entity_name='', changes=None):
        from .models import AdminAuditLog

        user = getattr(request, 'user', None)
        if user is not None and not user.is_authenticated:
            user = None

        audit_logger.info(
            f"{getattr(user, 'username', 'anonymous')} {action} {entity_type} {entity_id} {entity_name}"
        )

        try:
            return AdminAuditLog.objects.create(
                user=user,
                action=action,
                entity_type=entity_type,
                entity_id=str(entity_id),
                entity_name=(entity_name or '')[:200],
                changes=changes or None,
                ip_address=get_client_ip(request),
                user_agent=request.META.get('HTTP_USER_AGENT', ''),
            )
        except DatabaseError as e:
            audit_logger.error(f"Failed to write audit entry: {e}")
            return None
