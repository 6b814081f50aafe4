"""Service principals (enterprise applications)."""
from __future__ import annotations
from typing import Iterable, List, Optional

from .objects import DEFAULT_OBJECT_TYPES, DirectoryObject


class ServicePrincipal(DirectoryObject):
    """The tenant-local instance of an application."""
    
    type = "servicePrincipal"
    plural = "servicePrincipals"
    
    @property
    def app_id(self) -> Optional[str]:
        return self.properties.get("appId")
    
    def list_owners(self, type: Optional[Iterable[str]] = DEFAULT_OBJECT_TYPES) -> List[DirectoryObject]:
        return self._list_objects("owners", type)
