"""Registered devices."""
from __future__ import annotations
from typing import List, Optional

from .objects import DirectoryObject


class Device(DirectoryObject):
    type = "device"
    plural = "devices"
    
    @property
    def device_id(self) -> Optional[str]:
        """Device id assigned at registration, distinct from the object id."""
        return self.properties.get("deviceId")
    
    def list_registered_owners(self) -> List[DirectoryObject]:
        return self._list_objects("registeredOwners")
    
    def list_registered_users(self) -> List[DirectoryObject]:
        return self._list_objects("registeredUsers")
