"""
Files module - Signed upload URLs and public URLs for school uploads.
"""

from schoolbase.modules.files.router import router
from schoolbase.modules.files.schemas import FileCategory

__all__ = ["FileCategory", "router"]
