"""
Dataset catalog — the single source of truth for extractable datatypes.

Exports REGISTRY, the global DatasetRegistry instance populated with all
datatypes from the chain, transaction, and token domains.
"""

from colschema.registry import DatasetRegistry

REGISTRY = DatasetRegistry()

# Import domain modules to populate the registry
from colschema.datasets import blocks            # noqa: F401, E402
from colschema.datasets import transactions      # noqa: F401, E402
from colschema.datasets import logs              # noqa: F401, E402
from colschema.datasets import erc20_transfers   # noqa: F401, E402
