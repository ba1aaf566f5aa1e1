"""
Services module for Hikma
Content selection over the local database
"""

from .content_service import ContentService, pick_couplet, translate_author

__all__ = ['ContentService', 'pick_couplet', 'translate_author']
