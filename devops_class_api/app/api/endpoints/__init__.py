"""
Endpoint subpackage.

Each module defines an APIRouter for one group of routes; they are
combined in ``api/router.py``.
"""
