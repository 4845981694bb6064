"""
Core Infrastructure Components
==============================

- :class:`AzureClient` - Manages Azure credentials and client creation
- :class:`ConsoleLogger` - Line output and confirmation prompts
- Exception hierarchy for error handling

See Also
--------
boshkit.leftovers : Resource listers and cleaner.
boshkit.commands : Command implementations.
"""

from boshkit.core.azure_client import AzureClient
from boshkit.core.exceptions import (
    AzureClientError,
    BoshkitError,
    CleanerError,
    CredentialsError,
    DeleteError,
    ListingError,
    ServiceError,
    StateError,
    StateValidationError,
    TerraformError,
    VarsStoreError,
)
from boshkit.core.logging import ConsoleLogger, get_logger, setup_logging

__all__ = [
    # Client
    "AzureClient",
    # Logging
    "ConsoleLogger",
    "get_logger",
    "setup_logging",
    # Exceptions
    "BoshkitError",
    "AzureClientError",
    "CredentialsError",
    "ServiceError",
    "ListingError",
    "CleanerError",
    "DeleteError",
    "StateError",
    "StateValidationError",
    "TerraformError",
    "VarsStoreError",
]
