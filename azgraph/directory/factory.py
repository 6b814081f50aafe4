"""Typed construction of directory objects from raw API entries.

List endpoints such as ``memberOf`` or ``ownedObjects`` return heterogeneous
collections. Each entry carries an ``@odata.type`` discriminator which selects
the class to build; anything unrecognised becomes a plain ``DirectoryObject``.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Type

from .applications import Application
from .client import GraphClient
from .devices import Device
from .groups import Group
from .objects import DirectoryObject
from .service_principals import ServicePrincipal
from .users import User

ODATA_TYPE_FIELD = "@odata.type"

OBJECT_CLASSES: Dict[str, Type[DirectoryObject]] = {
    "#microsoft.graph.user": User,
    "#microsoft.graph.group": Group,
    "#microsoft.graph.application": Application,
    "#microsoft.graph.servicePrincipal": ServicePrincipal,
    "#microsoft.graph.device": Device,
}

CLASSES_BY_TYPE: Dict[str, Type[DirectoryObject]] = {cls.type: cls for cls in OBJECT_CLASSES.values()}


def object_type_of(properties: Dict[str, Any]) -> Optional[str]:
    """Return the type tag for a raw entry ("user", "group", ...), or None.
    
    The tag is derived from the discriminator with its namespace stripped, so
    unknown discriminators still produce a tag (e.g. "directoryRole").
    """
    odata_type = properties.get(ODATA_TYPE_FIELD)
    if not odata_type:
        return None
    return odata_type.rsplit(".", 1)[-1]


def class_for(properties: Dict[str, Any], type_hint: Optional[str] = None) -> Type[DirectoryObject]:
    """Pick the class for a raw entry.
    
    The discriminator wins when present; a type hint is only consulted for
    entries that carry no discriminator.
    """
    odata_type = properties.get(ODATA_TYPE_FIELD)
    if odata_type:
        return OBJECT_CLASSES.get(odata_type, DirectoryObject)
    return CLASSES_BY_TYPE.get(type_hint, DirectoryObject)


def construct(
    token: Any,
    tenant: str,
    properties: Dict[str, Any],
    type_hint: Optional[str] = None,
    client: Optional[GraphClient] = None,
) -> DirectoryObject:
    """Build the directory object subtype matching a raw entry.
    
    Args:
        token: Credential handle from the session
        tenant: Tenant identifier
        properties: Raw property bag from the API
        type_hint: Type tag to use when the entry has no discriminator
        client: HTTP client for the new object
        
    Returns:
        User, Group, Application, ServicePrincipal, Device or DirectoryObject
    """
    cls = class_for(properties, type_hint)
    return cls(token, tenant, properties, client=client)


def construct_list(
    token: Any,
    tenant: str,
    entries: Iterable[Dict[str, Any]],
    type_hint: Optional[str] = None,
    client: Optional[GraphClient] = None,
) -> List[DirectoryObject]:
    return [construct(token, tenant, entry, type_hint=type_hint, client=client) for entry in entries]


def filter_by_type(entries: Iterable[Dict[str, Any]], wanted_types: Optional[Iterable[str]]) -> List[Dict[str, Any]]:
    """Keep only raw entries whose type tag is in ``wanted_types``.
    
    ``None`` keeps everything. Entries without a discriminator never match
    an explicit type list.
    """
    if wanted_types is None:
        return list(entries)
    if isinstance(wanted_types, str):
        wanted_types = [wanted_types]
    wanted = set(wanted_types)
    return [entry for entry in entries if object_type_of(entry) in wanted]
