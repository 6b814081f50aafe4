"""Groups and group membership."""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .objects import DEFAULT_OBJECT_TYPES, DirectoryObject

logger = logging.getLogger(__name__)


class Group(DirectoryObject):
    """A security or Microsoft 365 group."""
    
    type = "group"
    plural = "groups"
    
    def list_members(self, type: Optional[Iterable[str]] = DEFAULT_OBJECT_TYPES) -> List[DirectoryObject]:
        """Direct members of the group, filtered by object type."""
        return self._list_objects("members", type)
    
    def list_owners(self, type: Optional[Iterable[str]] = DEFAULT_OBJECT_TYPES) -> List[DirectoryObject]:
        return self._list_objects("owners", type)
    
    def add_member(self, object_id: str) -> None:
        """Add a directory object to the group by id.
        
        Raises:
            HttpError: 400 if the object is already a member
        """
        ref = self.client.resource_url(self.tenant, "directoryObjects", object_id)
        self.do_operation("members/$ref", body={"@odata.id": ref}, http_verb="POST")
        logger.info(f"Added {object_id} to group {self.id}")
    
    def remove_member(self, object_id: str) -> None:
        """Remove a directory object from the group by id.
        
        Raises:
            HttpError: 404 if the object is not a member
        """
        self.do_operation(f"members/{object_id}/$ref", http_verb="DELETE")
        logger.info(f"Removed {object_id} from group {self.id}")
