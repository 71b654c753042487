"""arc19: template-ipfs resolution for mutable Algorand assets.

An asset's url field holds a template such as
``template-ipfs://{ipfscid:1:raw:reserve:sha2-256}`` and its reserve address
holds the sha2-256 digest of the current content.  This package:
  - validates templates and maps codec names to multicodec ids
  - rebuilds CIDs and gateway URLs from a template plus reserve
  - derives the reserve (and template) for newly published content
  - walks an asset's asset-config history into a timeline of metadata
"""

__version__ = "0.2.0"
__description__ = "Template-ipfs CID resolution and version history for mutable assets"

from arc19.core.cid_codec import parse_cid, resolve, resolve_template_url
from arc19.core.history_walker import HistoryWalker, walk_history
from arc19.core.template import is_well_formed, validate_template
from arc19.core.update_orchestrator import prepare_update

__all__ = [
    "HistoryWalker",
    "is_well_formed",
    "parse_cid",
    "prepare_update",
    "resolve",
    "resolve_template_url",
    "validate_template",
    "walk_history",
    "__version__",
]
