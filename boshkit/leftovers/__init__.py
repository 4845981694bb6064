"""
Leftover Resources
==================

Listers select resources by name filter and per-resource confirmation;
the cleaner deletes what they return.

Available Listers
-----------------
- :class:`Groups` - Azure resource groups
"""

from boshkit.leftovers.base import BaseLister, Deletable
from boshkit.leftovers.cleaner import (
    DeleteResult,
    DeleteStatus,
    DeleteSummary,
    LeftoversCleaner,
)
from boshkit.leftovers.groups import Groups, ResourceGroup

__all__ = [
    "BaseLister",
    "Deletable",
    "Groups",
    "ResourceGroup",
    "LeftoversCleaner",
    "DeleteResult",
    "DeleteStatus",
    "DeleteSummary",
]
