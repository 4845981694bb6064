"""
Base Lister Module
==================

Defines the abstract interfaces shared by every leftover resource kind.

Classes
-------
Deletable
    Uniform handle over a single cloud resource.
BaseLister
    Abstract base class for listers of one resource kind.

Example
-------
>>> class Disks(BaseLister):
...     resource_type = "Disk"
...
...     def fetch(self):
...         return [Disk(self.client, d.name) for d in self.client.list()]
...
>>> disks = Disks(client, logger).list(filter="bbl-")

Notes
-----
A candidate is kept only if its name contains the filter and the
confirmation hook accepts it. The filter is checked first so that the
user is never prompted for a resource that would be dropped anyway.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List

from boshkit.core.exceptions import ListingError

# Module logger
logger = logging.getLogger(__name__)


class Deletable(ABC):
    """
    A single cloud resource that can be confirmed and deleted.

    Implementations are immutable once constructed.
    """

    @abstractmethod
    def name(self) -> str:
        """Provider-assigned name of the resource."""

    @abstractmethod
    def type(self) -> str:
        """Human readable type tag (e.g. ``"Resource Group"``)."""

    @abstractmethod
    def delete(self) -> None:
        """
        Delete the resource from the provider.

        Raises
        ------
        DeleteError
            If the provider rejects the deletion.
        """

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}(name='{self.name()}')"


class BaseLister(ABC):
    """
    Abstract base class for all resource listers.

    Parameters
    ----------
    client : object
        Provider operations object for this resource kind.
    logger : object
        Confirmation hook exposing ``prompt_with_details(type, name)``.

    Attributes
    ----------
    resource_type : str
        Plural display name of the resource kind, used in errors.

    See Also
    --------
    Groups : Azure resource group implementation.
    """

    resource_type: str = ""

    def __init__(self, client: Any, logger: Any) -> None:
        self.client = client
        self.logger = logger

    @abstractmethod
    def fetch(self) -> List[Deletable]:
        """
        Fetch every resource of this kind from the provider.

        Returns
        -------
        list of Deletable
            All resources, in provider order.
        """

    def list(self, filter: str = "") -> List[Deletable]:
        """
        List the resources that match ``filter`` and were confirmed.

        Parameters
        ----------
        filter : str, default=""
            Substring that a resource name must contain. The empty
            string matches everything.

        Returns
        -------
        list of Deletable
            Surviving resources in provider order. Empty when nothing
            matches or everything was declined.

        Raises
        ------
        ListingError
            If the provider listing call fails.
        """
        try:
            candidates = self.fetch()
        except ListingError:
            raise
        except Exception as e:
            raise ListingError(
                f"Listing {self.resource_type}: {e}",
                resource_type=self.resource_type,
            ) from e

        resources: List[Deletable] = []
        for resource in candidates:
            if filter not in resource.name():
                continue

            if not self.logger.prompt_with_details(resource.type(), resource.name()):
                logger.debug(f"Skipping {resource.type()} {resource.name()}")
                continue

            resources.append(resource)

        logger.debug(
            f"Selected {len(resources)} of {len(candidates)} "
            f"{self.resource_type} matching '{filter}'"
        )
        return resources

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}(resource_type='{self.resource_type}')"
