"""
حكمة - Hikma
Random Arabic poetry couplets, wisdom quotes and hadith in the terminal
"""

from .models import Content, Mode

__version__ = "1.0.0"

__all__ = ['Content', 'Mode', '__version__']
