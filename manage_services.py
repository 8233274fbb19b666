#!/usr/bin/env python3
# manage_services.py
"""
List, inspect, import and delete registered services stored in MongoDB.

Run with: python manage_services.py list
"""

import argparse
import json
import sys

from pydantic import ValidationError

from services.registered_service import RegisteredService
from services.service_registry_store import ServiceRegistryStore
from utils.logger import get_logger

logger = get_logger("ManageServices")


def print_service(service: RegisteredService):
    """Print one service record."""
    print(f"🔖 [{service.id}] {service.name}")
    print(f"   Service ID: {service.service_id}")
    if service.description:
        print(f"   Description: {service.description}")
    print(f"   Evaluation order: {service.evaluation_order}")


def load_services_file(path: str):
    """Read one record or a list of records from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    return [RegisteredService(**item) for item in data]


def cmd_list(store: ServiceRegistryStore, args) -> int:
    services = store.load()
    if not services:
        print("⚠️  No registered services found.")
        return 0
    print(f"\n📋 Registered services ({len(services)} found):\n")
    for service in services:
        print_service(service)
    return 0


def cmd_count(store: ServiceRegistryStore, args) -> int:
    print(store.size())
    return 0


def cmd_find(store: ServiceRegistryStore, args) -> int:
    if args.id is not None:
        service = store.find_service_by_id(args.id)
    elif args.pattern is not None:
        service = store.find_service_matching(args.pattern)
    else:
        service = store.find_service_by_service_id(args.service_id)

    if service is None:
        print("❌ No matching service found")
        return 1
    print_service(service)
    return 0


def cmd_import(store: ServiceRegistryStore, args) -> int:
    try:
        services = load_services_file(args.file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"❌ Failed to read services from {args.file}: {e}")
        return 1

    for service in services:
        saved = store.save(service)
        print(f"✅ Saved [{saved.id}] {saved.name}")
    logger.info(f"Imported {len(services)} services from {args.file}")
    return 0


def cmd_delete(store: ServiceRegistryStore, args) -> int:
    service = store.find_service_by_id(args.id)
    if service is None or not store.delete(service):
        print(f"❌ No service with id {args.id}")
        return 1
    print(f"🗑️  Deleted [{service.id}] {service.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage registered services stored in MongoDB")
    parser.add_argument("--drop", action="store_true", help="Drop and recreate the collection before running")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all services").set_defaults(handler=cmd_list)
    subparsers.add_parser("count", help="Count services").set_defaults(handler=cmd_count)

    find_parser = subparsers.add_parser("find", help="Find one service")
    group = find_parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", type=int, help="Numeric service id")
    group.add_argument("--pattern", type=str, help="Case-insensitive regex on the service identifier")
    group.add_argument("--service-id", type=str, help="Exact service identifier")
    find_parser.set_defaults(handler=cmd_find)

    import_parser = subparsers.add_parser("import", help="Save services from a JSON file")
    import_parser.add_argument("file", type=str, help="Path to JSON file")
    import_parser.set_defaults(handler=cmd_import)

    delete_parser = subparsers.add_parser("delete", help="Delete a service by id")
    delete_parser.add_argument("--id", type=int, required=True, help="Numeric service id")
    delete_parser.set_defaults(handler=cmd_delete)

    return parser


def main(argv=None, store: ServiceRegistryStore = None) -> int:
    args = build_parser().parse_args(argv)

    if store is None:
        store = ServiceRegistryStore.from_config(drop_collection=True if args.drop else None)
    elif args.drop:
        store.drop_collection = True
        store.initialize_collection()

    return args.handler(store, args)


if __name__ == "__main__":
    sys.exit(main())
