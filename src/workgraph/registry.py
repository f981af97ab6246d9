"""
Bidirectional mapping between workspace-relative local paths and canonical names.
"""

import logging
from typing import Dict, Optional

from workgraph.constants import ERROR_TEMPLATES
from workgraph.errors import RegistryConflictError

logger = logging.getLogger(__name__)


class NameRegistry:
    """Local path <-> canonical name bijection.

    Re-inserting an identical pair is a no-op. Binding either side to a
    different counterpart raises :class:`RegistryConflictError` and leaves
    the registry unchanged.
    """

    def __init__(self, kind: str = "name"):
        self.kind = kind
        self._canonical: Dict[str, str] = {}
        self._local: Dict[str, str] = {}

    def insert(self, local: str, canonical: str) -> None:
        existing = self._canonical.get(local)
        if existing is not None and existing != canonical:
            raise RegistryConflictError(
                ERROR_TEMPLATES["registry_conflict"].format(
                    side=f"{self.kind} path", key=local, existing=existing, value=canonical
                )
            )
        existing = self._local.get(canonical)
        if existing is not None and existing != local:
            raise RegistryConflictError(
                ERROR_TEMPLATES["registry_conflict"].format(
                    side=f"{self.kind} name", key=canonical, existing=existing, value=local
                )
            )
        if local not in self._canonical:
            logger.debug(f"Registered {self.kind} {local} as {canonical}")
        self._canonical[local] = canonical
        self._local[canonical] = local

    def lookup_canonical(self, local: str) -> Optional[str]:
        return self._canonical.get(local)

    def lookup_local(self, canonical: str) -> Optional[str]:
        return self._local.get(canonical)

    def __contains__(self, local: str) -> bool:
        return local in self._canonical

    def __len__(self) -> int:
        return len(self._canonical)

    def __repr__(self) -> str:
        return f"NameRegistry(kind={self.kind}, entries={len(self)})"
