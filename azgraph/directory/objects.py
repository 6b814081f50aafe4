"""Generic directory object: identity, CRUD primitive and membership queries.

Every subtype (user, group, application, service principal, device) inherits
``do_operation``, ``sync_fields``, ``update`` and ``delete`` from here and only
narrows ``type`` and the plural path segment.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .client import GraphClient
from .exceptions import InvalidResponseError, ObjectNotPersistedError
from .paging import get_paged_list

logger = logging.getLogger(__name__)

DEFAULT_OBJECT_TYPES = ("user", "group", "application", "servicePrincipal")


class DirectoryObject:
    """Base class for directory objects.
    
    Attributes:
        token: Credential handle supplied by the session (read-only)
        tenant: Tenant identifier (read-only)
        type: Object type tag, fixed per class
        properties: Property bag as last seen on the server
        client: HTTP client used for every request
    
    Constructing an object does not call the API. Objects are normally built
    by a session after a create or get call, or from an already-known
    property bag.
    """
    
    type = "directoryObject"
    plural = "directoryObjects"
    
    def __init__(
        self,
        token: Any,
        tenant: str,
        properties: Optional[Dict[str, Any]] = None,
        client: Optional[GraphClient] = None,
    ):
        self._token = token
        self._tenant = tenant
        self.properties: Dict[str, Any] = dict(properties or {})
        self._client = client
    
    @property
    def client(self) -> GraphClient:
        """HTTP client for this object, built from settings on first use if none was given."""
        if self._client is None:
            self._client = GraphClient()
        return self._client
    
    @property
    def token(self) -> Any:
        return self._token
    
    @property
    def tenant(self) -> str:
        return self._tenant
    
    @property
    def id(self) -> Optional[str]:
        return self.properties.get("id")
    
    @property
    def display_name(self) -> Optional[str]:
        return self.properties.get("displayName")
    
    def get(self, name: str, default: Any = None) -> Any:
        """Read a single property."""
        return self.properties.get(name, default)
    
    # ─────────────────────────────────────────────────────────────────────────
    # Generic operation primitive
    # ─────────────────────────────────────────────────────────────────────────
    def resource_url(self, op: str = "") -> str:
        """URL of this object's resource, optionally extended by an operation path."""
        if not self.id:
            raise ObjectNotPersistedError(f"{self.type} object has no id")
        return self.client.resource_url(self.tenant, self.plural, self.id, op)
    
    def do_operation(
        self,
        op: str = "",
        body: Optional[Any] = None,
        http_verb: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[Any]:
        """Carry out an arbitrary operation on this object.
        
        Args:
            op: Operation path appended to the object's URL (e.g. "memberOf")
            body: Request body, JSON-encoded when given
            http_verb: HTTP method
            params: Query parameters
            headers: Extra request headers
            
        Returns:
            Parsed JSON response, or None for empty responses
            
        Raises:
            HttpError: On non-2xx responses
            TransportError: When the request could not be sent
            ObjectNotPersistedError: If the object has no id
        """
        return self.client.call(http_verb, self.resource_url(op), self.token, body=body, params=params, headers=headers)
    
    def sync_fields(self) -> "DirectoryObject":
        """Replace the local properties with the server's current view.
        
        Raises:
            InvalidResponseError: If the server returned no body; local properties are kept
        """
        url = self.resource_url()
        properties = self.client.call("GET", url, self.token)
        if not isinstance(properties, dict):
            raise InvalidResponseError(f"expected a {self.type} object, got {type(properties).__name__}", url)
        self.properties = properties
        return self
    
    def update(self, **properties: Any) -> "DirectoryObject":
        """Merge properties into the object and PATCH the merged set to the server.
        
        The local property bag only changes once the PATCH succeeds.
        """
        merged = {**self.properties, **properties}
        self.do_operation(body=merged, http_verb="PATCH")
        self.properties = merged
        logger.info(f"Updated {self.type} {self.id}: {sorted(properties)}")
        return self
    
    def delete(self, confirm: bool = True) -> None:
        """Delete the object on the server.
        
        Args:
            confirm: Ask for confirmation first
        
        The local object is left as is; it should not be used afterwards.
        """
        if confirm:
            msg = f"Do you really want to delete the {self.type} '{self.display_name}'?"
            if not self.client.confirm(msg):
                logger.info(f"Deletion of {self.type} {self.id} declined")
                return
        self.do_operation(http_verb="DELETE")
        logger.info(f"Deleted {self.type} {self.id}")
    
    # ─────────────────────────────────────────────────────────────────────────
    # Membership queries
    # ─────────────────────────────────────────────────────────────────────────
    def list_group_memberships(self, security_only: bool = False) -> List[str]:
        """Return the ids of all groups this object is a member of (transitive)."""
        res = self.do_operation("getMemberGroups", body={"securityEnabledOnly": security_only}, http_verb="POST")
        return self._get_paged_list(res)
    
    def list_object_memberships(self, security_only: bool = False) -> List[str]:
        """Return the ids of all groups, administrative units and directory roles
        this object is a member of (transitive)."""
        res = self.do_operation("getMemberObjects", body={"securityEnabledOnly": security_only}, http_verb="POST")
        return self._get_paged_list(res)
    
    def list_direct_memberships(self, id_only: bool = True) -> Union[List[str], Dict[str, Any]]:
        """List the groups this object is a direct member of.
        
        Args:
            id_only: Return only group ids (default), or group objects keyed by display name
        """
        from .groups import Group
        
        res = self._get_paged_list(self.do_operation("memberOf"))
        if id_only:
            return [grp["id"] for grp in res]
        return {
            grp.get("displayName"): Group(self.token, self.tenant, grp, client=self.client)
            for grp in res
        }
    
    # ─────────────────────────────────────────────────────────────────────────
    # Helpers shared by subtypes
    # ─────────────────────────────────────────────────────────────────────────
    def _get_paged_list(self, first_page: Optional[Dict[str, Any]]) -> List[Any]:
        def fetch_next(link: str) -> Dict[str, Any]:
            return self.client.call("GET", self.client.absolute_url(self.tenant, link), self.token)
        
        return get_paged_list(first_page, fetch_next)
    
    def _list_objects(self, relation: str, type: Optional[Iterable[str]] = None) -> List["DirectoryObject"]:
        """Fetch a relation, optionally filter it by type, and build typed objects."""
        from .factory import construct_list, filter_by_type
        
        res = self._get_paged_list(self.do_operation(relation))
        if type is not None:
            res = filter_by_type(res, type)
        return construct_list(self.token, self.tenant, res, client=self.client)
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.display_name}' id={self.id}>"
