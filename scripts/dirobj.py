"""Inspect and manage directory objects from the command line.

This module serves as a CLI wrapper around azgraph.directory objects.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from azgraph.config import load_settings
from azgraph.directory import (
    CLASSES_BY_TYPE,
    DEFAULT_OBJECT_TYPES,
    GraphClient,
    GraphError,
    HttpError,
    User,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _describe(obj) -> dict:
    return {"id": obj.id, "type": obj.type, "displayName": obj.display_name}


def _load_object(client, args, object_type: str):
    cls = CLASSES_BY_TYPE[object_type]
    return cls(args.token, args.tenant, {"id": args.id}, client=client).sync_fields()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Directory object helper")
    parser.add_argument("--host", help="API base URL (default: GRAPH_HOST)")
    parser.add_argument("--tenant", help="Tenant id or domain (default: GRAPH_TENANT)")
    parser.add_argument("--token", help="Bearer token (default: GRAPH_ACCESS_TOKEN)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Default: GRAPH_LOG_LEVEL")
    
    sub = parser.add_subparsers(dest="cmd")
    type_choices = sorted(CLASSES_BY_TYPE)
    
    show = sub.add_parser("show")
    show.add_argument("type", choices=type_choices)
    show.add_argument("id")
    
    mem = sub.add_parser("memberships")
    mem.add_argument("type", choices=type_choices)
    mem.add_argument("id")
    mem_mode = mem.add_mutually_exclusive_group()
    mem_mode.add_argument("--transitive", action="store_true", help="Include nested group memberships (ids only)")
    mem_mode.add_argument("--objects", action="store_true", help="Return group objects instead of ids")
    
    owned = sub.add_parser("owned")
    owned.add_argument("id", help="User id or principal name")
    owned.add_argument("--type", nargs="*", default=list(DEFAULT_OBJECT_TYPES))
    
    delete = sub.add_parser("delete")
    delete.add_argument("type", choices=type_choices)
    delete.add_argument("id")
    delete.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    
    args = parser.parse_args(argv)
    
    if not args.cmd:
        parser.print_help()
        return 0
    
    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))
    
    args.host = args.host or settings.graph_host
    args.tenant = args.tenant or settings.tenant
    args.token = args.token or settings.access_token
    log_level = args.log_level or settings.log_level
    if log_level not in LOG_LEVELS:
        parser.error(f"Invalid log level '{log_level}' (choose from {', '.join(LOG_LEVELS)})")
    
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    
    if not args.token:
        parser.error("Missing access token (set GRAPH_ACCESS_TOKEN or pass --token)")
    if not args.tenant:
        parser.error("Missing tenant (set GRAPH_TENANT or pass --tenant)")
    
    client = GraphClient(args.host, timeout=settings.request_timeout)
    
    try:
        if args.cmd == "show":
            result = _load_object(client, args, args.type).properties
        elif args.cmd == "memberships":
            obj = _load_object(client, args, args.type)
            if args.transitive:
                result = obj.list_group_memberships()
            elif args.objects:
                result = {name: _describe(grp) for name, grp in obj.list_direct_memberships(id_only=False).items()}
            else:
                result = obj.list_direct_memberships()
        elif args.cmd == "owned":
            user = User(args.token, args.tenant, {"id": args.id}, client=client)
            result = [_describe(obj) for obj in user.list_owned_objects(type=args.type)]
        elif args.cmd == "delete":
            obj = _load_object(client, args, args.type)
            obj.delete(confirm=not args.yes)
            return 0
    except HttpError as e:
        print(f"[dirobj] API error {e.status_code}: {e.body}", file=sys.stderr)
        return 1
    except GraphError as e:
        print(f"[dirobj] {e}", file=sys.stderr)
        return 1
    
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
