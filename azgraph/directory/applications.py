"""App registrations."""
from __future__ import annotations
from typing import Iterable, List, Optional

from .objects import DEFAULT_OBJECT_TYPES, DirectoryObject


class Application(DirectoryObject):
    """An app registration."""
    
    type = "application"
    plural = "applications"
    
    @property
    def app_id(self) -> Optional[str]:
        """Client (application) id, distinct from the object id."""
        return self.properties.get("appId")
    
    def list_owners(self, type: Optional[Iterable[str]] = DEFAULT_OBJECT_TYPES) -> List[DirectoryObject]:
        return self._list_objects("owners", type)
