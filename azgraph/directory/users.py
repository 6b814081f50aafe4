"""User accounts."""
from __future__ import annotations
import base64
import logging
import secrets
from typing import Any, Dict, Iterable, List, Optional

from .client import GraphClient
from .objects import DEFAULT_OBJECT_TYPES, DirectoryObject

logger = logging.getLogger(__name__)


class User(DirectoryObject):
    """A user account.
    
    ``password`` holds the last password set through ``reset_password`` (or
    passed in by the session when it created the account); it is never read
    back from the server.
    """
    
    type = "user"
    plural = "users"
    
    def __init__(
        self,
        token: Any,
        tenant: str,
        properties: Optional[Dict[str, Any]] = None,
        password: Optional[str] = None,
        client: Optional[GraphClient] = None,
    ):
        super().__init__(token, tenant, properties, client=client)
        self.password = password
    
    def reset_password(self, password: Optional[str] = None, force_password_change: bool = True) -> str:
        """Reset the user's password.
        
        Args:
            password: New password; a random one is generated when omitted
            force_password_change: Require a change at next sign-in
            
        Returns:
            The new password
        """
        if password is None:
            password = base64.b64encode(secrets.token_bytes(40)).decode("ascii")
        
        body = {
            "passwordProfile": {
                "password": password,
                "forceChangePasswordNextSignIn": force_password_change,
                "forceChangePasswordNextSignInWithMfa": False,
            }
        }
        self.do_operation(body=body, http_verb="PATCH")
        # The server holds the new password from here on, even if the re-sync fails
        self.password = password
        logger.info(f"Password reset for user {self.id}")
        self.sync_fields()
        return password
    
    def list_owned_objects(self, type: Optional[Iterable[str]] = DEFAULT_OBJECT_TYPES) -> List[DirectoryObject]:
        """Directory objects (groups, apps, service principals) owned by this user."""
        return self._list_objects("ownedObjects", type)
    
    def list_created_objects(self, type: Optional[Iterable[str]] = DEFAULT_OBJECT_TYPES) -> List[DirectoryObject]:
        """Directory objects created by this user."""
        return self._list_objects("createdObjects", type)
    
    def list_owned_devices(self) -> List[DirectoryObject]:
        return self._list_objects("ownedDevices")
    
    def list_registered_devices(self) -> List[DirectoryObject]:
        return self._list_objects("registeredDevices")
    
    def __repr__(self) -> str:
        return (
            f"<User '{self.display_name}' upn={self.get('userPrincipalName')} "
            f"mail={self.get('mail')} id={self.id}>"
        )
