"""
boshkit: Tooling for BOSH Environments on Azure
===============================================

A small CLI that prints the shell environment needed to reach a BOSH
director through its jumpbox, and cleans up Azure resource groups left
behind by torn-down environments.

Modules
-------
core
    Azure client, exceptions and logging
leftovers
    Listing, confirming and deleting leftover resources
commands
    Command implementations (print-env)
storage
    Persisted deployment state
terraform
    Terraform output access
bosh
    BOSH vars store readers
reporters
    Terminal output

Example
-------
>>> from boshkit.core import AzureClient, ConsoleLogger
>>> from boshkit.leftovers import Groups
>>>
>>> client = AzureClient(subscription_id="sub-id")
>>> groups = Groups(client.get_resource_groups_client(), ConsoleLogger())
>>> resources = groups.list("bbl-env")

Notes
-----
Azure credentials are resolved by ``DefaultAzureCredential``:
- Environment variables (AZURE_CLIENT_ID, AZURE_CLIENT_SECRET, AZURE_TENANT_ID)
- Managed identity
- An ``az login`` session
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from boshkit.commands.print_env import PrintEnv
from boshkit.core.azure_client import AzureClient, AzureClientError
from boshkit.leftovers.groups import Groups, ResourceGroup

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core classes
    "AzureClient",
    "AzureClientError",
    "Groups",
    "ResourceGroup",
    "PrintEnv",
]
