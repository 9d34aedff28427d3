"""Service layer implementations."""

from .content_service import ContentService

__all__ = ['ContentService']
