"""
Azure Resource Groups
=====================

Lists and deletes Azure resource groups left behind by an environment.

Example
-------
>>> from boshkit.core.azure_client import AzureClient
>>> from boshkit.core.logging import ConsoleLogger
>>>
>>> client = AzureClient(subscription_id="sub-id")
>>> groups = Groups(client.get_resource_groups_client(), ConsoleLogger())
>>> for group in groups.list(filter="bbl-env"):
...     group.delete()
"""

from __future__ import annotations

import logging
from typing import Any, List

from boshkit.core.exceptions import DeleteError
from boshkit.leftovers.base import BaseLister, Deletable

# Module logger
logger = logging.getLogger(__name__)


class ResourceGroup(Deletable):
    """
    A single Azure resource group.

    Parameters
    ----------
    client : ResourceGroupsOperations
        Operations object used to delete the group.
    name : str
        Name of the resource group.
    """

    def __init__(self, client: Any, name: str) -> None:
        self._client = client
        self._name = name

    def name(self) -> str:
        return self._name

    def type(self) -> str:
        return "Resource Group"

    def delete(self) -> None:
        """
        Delete the resource group and wait for Azure to finish.

        Raises
        ------
        DeleteError
            If the deletion is rejected or the poller fails.
        """
        logger.info(f"Deleting {self.type()} {self._name}")
        try:
            poller = self._client.begin_delete(self._name)
            poller.result()
        except Exception as e:
            raise DeleteError(
                f"Deleting {self.type()} {self._name}: {e}",
                resource_name=self._name,
                resource_type=self.type(),
            ) from e


class Groups(BaseLister):
    """
    Lister for Azure resource groups.

    Parameters
    ----------
    client : ResourceGroupsOperations
        Exposes ``list(filter=None, top=None)`` and ``begin_delete(name)``.
    logger : object
        Confirmation hook exposing ``prompt_with_details(type, name)``.
    """

    resource_type = "Resource Groups"

    def fetch(self) -> List[Deletable]:
        """Fetch every resource group in the subscription."""
        # The pager is lazy; drain it so paging errors surface here.
        groups = list(self.client.list(filter=None, top=None))
        logger.debug(f"Found {len(groups)} resource groups")
        return [ResourceGroup(self.client, group.name) for group in groups]
