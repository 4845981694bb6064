"""
Custom Exceptions for boshkit
=============================

This module defines a hierarchy of custom exceptions used throughout
the application for consistent error handling and reporting.

Exception Hierarchy
-------------------
::

    BoshkitError (base)
    ├── AzureClientError
    │   ├── CredentialsError
    │   └── ServiceError
    ├── ListingError
    ├── CleanerError
    │   └── DeleteError
    ├── StateError
    │   └── StateValidationError
    ├── TerraformError
    └── VarsStoreError

Example
-------
>>> from boshkit.core.exceptions import AzureClientError, CredentialsError
>>>
>>> try:
...     client.validate_credentials()
... except CredentialsError as e:
...     print(f"Invalid credentials: {e}")
... except AzureClientError as e:
...     print(f"Azure error: {e}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BoshkitError(Exception):
    """
    Base exception for all boshkit errors.

    All custom exceptions in the application inherit from this class,
    allowing for broad exception catching at the command boundary.

    Parameters
    ----------
    message : str
        Human-readable error message.
    details : dict, optional
        Additional context about the error.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Additional error details.

    Example
    -------
    >>> raise BoshkitError("Something went wrong", details={"code": 500})
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


# =============================================================================
# Azure Client Exceptions
# =============================================================================


class AzureClientError(BoshkitError):
    """
    Base exception for Azure client-related errors.

    Raised when there's an issue with Azure connectivity, authentication,
    or service access.

    Parameters
    ----------
    message : str
        Human-readable error message.
    service : str, optional
        The Azure service that caused the error.
    subscription_id : str, optional
        The subscription the client was bound to.
    details : dict, optional
        Additional context about the error.
    """

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        subscription_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.service = service
        self.subscription_id = subscription_id
        full_details = details or {}
        if service:
            full_details["service"] = service
        if subscription_id:
            full_details["subscription_id"] = subscription_id
        super().__init__(message, full_details)


class CredentialsError(AzureClientError):
    """
    Raised when Azure credentials are invalid, missing, or expired.

    Example
    -------
    >>> raise CredentialsError(
    ...     "Azure credentials not found",
    ...     details={"hint": "Run 'az login' to set up credentials"}
    ... )
    """

    pass


class ServiceError(AzureClientError):
    """
    Raised when there's an error building a client for an Azure service.

    Example
    -------
    >>> raise ServiceError(
    ...     "Failed to create resource management client",
    ...     service="resource",
    ... )
    """

    pass


# =============================================================================
# Leftovers Exceptions
# =============================================================================


class ListingError(BoshkitError):
    """
    Raised when the provider refuses to list a kind of resource.

    The message always names the resource kind, and the provider's
    exception is chained as ``__cause__``.

    Parameters
    ----------
    message : str
        Human-readable error message.
    resource_type : str, optional
        The kind of resource being listed.
    """

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.resource_type = resource_type
        super().__init__(message, details)


class CleanerError(BoshkitError):
    """
    Base exception for cleaner-related errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    resource_name : str, optional
        The name of the resource being cleaned.
    resource_type : str, optional
        The type of resource being cleaned.
    details : dict, optional
        Additional context about the error.
    """

    def __init__(
        self,
        message: str,
        resource_name: Optional[str] = None,
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.resource_name = resource_name
        self.resource_type = resource_type
        super().__init__(message, details)


class DeleteError(CleanerError):
    """
    Raised when unable to delete a resource.

    Example
    -------
    >>> raise DeleteError(
    ...     "Deleting Resource Group bbl-env-rg: conflict",
    ...     resource_name="bbl-env-rg",
    ...     resource_type="Resource Group"
    ... )
    """

    pass


# =============================================================================
# State and Collaborator Exceptions
# =============================================================================


class StateError(BoshkitError):
    """Base exception for problems with the persisted deployment state."""

    pass


class StateValidationError(StateError):
    """
    Raised when the state directory holds no usable state.

    Example
    -------
    >>> raise StateValidationError(
    ...     "bbl-state.json not found in /tmp/env",
    ...     details={"hint": "Pass --state-dir or set BBL_STATE_DIR"}
    ... )
    """

    pass


class TerraformError(BoshkitError):
    """Raised when terraform outputs cannot be read."""

    pass


class VarsStoreError(BoshkitError):
    """Raised when a BOSH vars store file or one of its keys is missing."""

    pass
