"""
Services Package

Exports all services for easy importing.
"""

from edureach.services.roles import (
    classify_viewer, is_admin_role, Viewer,
    ROLE_ANONYMOUS, ROLE_USER, ROLE_ADMIN, ROLE_SUPER_ADMIN,
)
from edureach.services.credentials import update_credentials, CredentialError
from edureach.services.consultation import (
    send_consultation_email, ConsultationError, ConsultationValidationError,
)
from edureach.services.admin_accounts import (
    ensure_super_admin, create_admin_account, set_admin_active, delete_admin_account,
    AdminAccountError,
)
from edureach.services.icons import icon_class, normalize_icon, ICON_CHOICES

__all__ = [
    'classify_viewer',
    'is_admin_role',
    'Viewer',
    'ROLE_ANONYMOUS',
    'ROLE_USER',
    'ROLE_ADMIN',
    'ROLE_SUPER_ADMIN',
    'update_credentials',
    'CredentialError',
    'send_consultation_email',
    'ConsultationError',
    'ConsultationValidationError',
    'ensure_super_admin',
    'create_admin_account',
    'set_admin_active',
    'delete_admin_account',
    'AdminAccountError',
    'icon_class',
    'normalize_icon',
    'ICON_CHOICES',
]
