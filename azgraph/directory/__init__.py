"""Directory object model for the Graph REST API.

This package provides typed, testable wrappers around directory objects.

Architecture:
- client.py: HTTP client (URL convention, bearer header, error mapping)
- paging.py: Paged result traversal (value + @odata.nextLink)
- objects.py: DirectoryObject base with the generic operation primitive
- factory.py: Type dispatch from @odata.type to the matching class
- users.py, groups.py, applications.py, service_principals.py, devices.py: Subtypes
- prompt.py: Confirmation prompt used before deletions
- exceptions.py: Typed exceptions for error handling

Usage:
    from azgraph.directory import GraphClient, User
    
    client = GraphClient("https://graph.microsoft.com/v1.0")
    user = User(token, "contoso.onmicrosoft.com", {"id": user_id}, client=client).sync_fields()
    
    group_ids = user.list_direct_memberships()
    apps = user.list_owned_objects(type=["application", "servicePrincipal"])
"""
from .client import (
    GraphClient,
    bearer_token,
)
from .exceptions import (
    GraphError,
    TransportError,
    HttpError,
    ObjectNotPersistedError,
    InvalidResponseError,
)
from .paging import (
    PagedResult,
    get_paged_list,
    next_link,
)
from .objects import (
    DirectoryObject,
    DEFAULT_OBJECT_TYPES,
)
from .users import User
from .groups import Group
from .applications import Application
from .service_principals import ServicePrincipal
from .devices import Device
from .factory import (
    OBJECT_CLASSES,
    CLASSES_BY_TYPE,
    construct,
    construct_list,
    filter_by_type,
    object_type_of,
)
from .prompt import ask_confirmation

__all__ = [
    # Client
    "GraphClient",
    "bearer_token",
    
    # Exceptions
    "GraphError",
    "TransportError",
    "HttpError",
    "ObjectNotPersistedError",
    "InvalidResponseError",
    
    # Paging
    "PagedResult",
    "get_paged_list",
    "next_link",
    
    # Objects
    "DirectoryObject",
    "DEFAULT_OBJECT_TYPES",
    "User",
    "Group",
    "Application",
    "ServicePrincipal",
    "Device",
    
    # Factory
    "OBJECT_CLASSES",
    "CLASSES_BY_TYPE",
    "construct",
    "construct_list",
    "filter_by_type",
    "object_type_of",
    
    # Prompt
    "ask_confirmation",
]
