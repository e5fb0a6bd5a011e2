"""Page export for the mobile application.

Visibility rules, the page tree builder, the page serializer and the export
service that assembles the JSON documents.
"""

from .errors import ExportError, PageTreeCycleError
from .models import ExportedImage, ExportedPage, TreeEntry
from .visibility import VisibilityPolicy, is_visible
from .tree_builder import PageTreeBuilder
from .serializer import PageSerializer
from .export_service import ExportService, INVALID_ID_ERROR

__all__ = [
    'ExportError',
    'PageTreeCycleError',
    'ExportedImage',
    'ExportedPage',
    'TreeEntry',
    'VisibilityPolicy',
    'is_visible',
    'PageTreeBuilder',
    'PageSerializer',
    'ExportService',
    'INVALID_ID_ERROR',
]
