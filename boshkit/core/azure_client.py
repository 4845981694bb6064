"""
Azure Client Module
===================

Provides a wrapper around the Azure SDK for managing connections to
Azure Resource Manager with lazy initialization and credential
validation.

This module implements the Azure client layer of the application,
handling all direct communication with Azure services.

Classes
-------
AzureClient
    Main client class for Azure operations.

Example
-------
>>> from boshkit.core.azure_client import AzureClient
>>>
>>> client = AzureClient(subscription_id="00000000-0000-0000-0000-000000000000")
>>> client.validate_credentials()
>>> groups = client.get_resource_groups_client()

Notes
-----
The credential and the management client are created on first access
and cached for subsequent calls.

See Also
--------
azure.identity : Azure credential providers.
azure.mgmt.resource : Azure Resource Manager client.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from azure.core.exceptions import ClientAuthenticationError
from azure.identity import DefaultAzureCredential
from azure.mgmt.resource import ResourceManagementClient

from boshkit.core.exceptions import (
    AzureClientError,
    CredentialsError,
    ServiceError,
)

# Module logger
logger = logging.getLogger(__name__)

MANAGEMENT_SCOPE = "https://management.azure.com/.default"


class AzureClient:
    """
    Azure client wrapper with credential management.

    Parameters
    ----------
    subscription_id : str
        Azure subscription to operate on.
    credential : TokenCredential, optional
        Credential to authenticate with. Defaults to
        ``DefaultAzureCredential``, which reads environment variables,
        managed identity, or an ``az login`` session.

    Attributes
    ----------
    subscription_id : str
        The configured subscription.

    Examples
    --------
    >>> client = AzureClient(subscription_id="sub-id")
    >>> client.validate_credentials()
    True

    Raises
    ------
    CredentialsError
        If Azure credentials are not found or invalid.
    ServiceError
        If unable to build a service client.
    """

    def __init__(
        self,
        subscription_id: str,
        credential: Optional[Any] = None,
    ) -> None:
        """Initialize Azure client with the specified configuration."""
        if not subscription_id:
            raise CredentialsError(
                "Azure subscription ID is required",
                details={"hint": "Pass --subscription-id or set AZURE_SUBSCRIPTION_ID"},
            )

        self.subscription_id = subscription_id

        # Lazy-loaded components
        self._credential = credential
        self._resource_client: Optional[ResourceManagementClient] = None

        logger.debug(f"Initialized AzureClient for subscription {subscription_id}")

    @property
    def credential(self) -> Any:
        """
        Get or create the Azure credential (lazy initialization).

        Returns
        -------
        TokenCredential
            The configured credential.
        """
        if self._credential is None:
            try:
                self._credential = DefaultAzureCredential()
            except Exception as e:
                logger.exception("Failed to create Azure credential")
                raise CredentialsError(f"Failed to create Azure credential: {e}")
        return self._credential

    def get_resource_client(self) -> ResourceManagementClient:
        """
        Get the Resource Manager client.

        Returns
        -------
        ResourceManagementClient
            Client bound to the configured subscription.

        Raises
        ------
        ServiceError
            If unable to create the client.
        """
        if self._resource_client is not None:
            return self._resource_client

        try:
            self._resource_client = ResourceManagementClient(
                self.credential, self.subscription_id
            )
            logger.debug("Created resource management client")
            return self._resource_client
        except AzureClientError:
            raise
        except Exception as e:
            logger.exception("Failed to create resource management client")
            raise ServiceError(
                f"Failed to create resource management client: {e}",
                service="resource",
                subscription_id=self.subscription_id,
            )

    def get_resource_groups_client(self) -> Any:
        """
        Get the resource group operations of the Resource Manager client.

        Returns
        -------
        ResourceGroupsOperations
            Object exposing ``list`` and ``begin_delete``.
        """
        return self.get_resource_client().resource_groups

    def validate_credentials(self) -> bool:
        """
        Validate Azure credentials by requesting a management token.

        Returns
        -------
        bool
            True if credentials are valid.

        Raises
        ------
        CredentialsError
            If credentials are invalid, expired, or missing.
        """
        try:
            self.credential.get_token(MANAGEMENT_SCOPE)
            logger.info(
                f"Credentials validated for subscription {self.subscription_id}"
            )
            return True

        except ClientAuthenticationError as e:
            raise CredentialsError(
                "Invalid Azure credentials",
                subscription_id=self.subscription_id,
                details={
                    "error": e.message,
                    "hint": "Run 'az login' or set AZURE_CLIENT_ID, "
                    "AZURE_CLIENT_SECRET and AZURE_TENANT_ID",
                },
            )
        except CredentialsError:
            raise
        except Exception as e:
            logger.exception("Credential validation failed")
            raise CredentialsError(f"Failed to validate credentials: {e}")

    def __enter__(self) -> AzureClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close the management client."""
        if self._resource_client is not None:
            self._resource_client.close()
            self._resource_client = None

    def __repr__(self) -> str:
        """Return string representation of the client."""
        return f"AzureClient(subscription_id='{self.subscription_id}')"


__all__ = ["AzureClient", "AzureClientError"]
