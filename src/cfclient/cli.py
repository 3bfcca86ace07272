"""CLI for listing and fetching builds, deployments and processes."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone

from .config.runtime import get_settings
from .domain.filters import LabelSelector
from .errors import CloudFoundryError, TransportError
from .models.list_options import (
    BuildListOptions,
    DeploymentListOptions,
    ListOptions,
    ProcessListOptions,
)
from .wiring import build_client

_LIST_OPTIONS: dict[str, type[ListOptions]] = {
    "builds": BuildListOptions,
    "deployments": DeploymentListOptions,
    "processes": ProcessListOptions,
}


def parse_label(spec: str, selector: LabelSelector) -> LabelSelector:
    """Apply one ``--label`` argument: ``key``, ``!key``, ``key=a,b`` or ``key!=a,b``."""
    spec = spec.strip()
    if "!=" in spec:
        key, _, raw = spec.partition("!=")
        values = [v.strip() for v in raw.split(",") if v.strip()]
        if not key.strip() or not values:
            raise ValueError(f"invalid label requirement: {spec!r}")
        return selector.not_equal_to(key.strip(), *values)
    if "=" in spec:
        key, _, raw = spec.partition("=")
        values = [v.strip() for v in raw.split(",") if v.strip()]
        if not key.strip() or not values:
            raise ValueError(f"invalid label requirement: {spec!r}")
        return selector.equal_to(key.strip(), *values)
    if spec.startswith("!"):
        key = spec[1:].strip()
        if not key:
            raise ValueError(f"invalid label requirement: {spec!r}")
        return selector.not_exists(key)
    if not spec:
        raise ValueError("empty label requirement")
    return selector.exists(spec)


def parse_timestamp(value: str) -> datetime:
    """ISO 8601 with optional trailing Z; naive values are taken as UTC."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        ts = datetime.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid timestamp: {value!r}") from e
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def build_list_options(resource: str, args: argparse.Namespace) -> ListOptions:
    """Translate parsed ``list`` arguments into the resource's ListOptions."""
    opts = _LIST_OPTIONS[resource](page=args.page, per_page=args.per_page)
    if args.order_by:
        opts.order_by = args.order_by
    for spec in args.label or []:
        parse_label(spec, opts.label_selector)

    if args.created_after:
        opts.created_ats.after(args.created_after)
    if args.created_before:
        opts.created_ats.before(args.created_before)
    if args.updated_after:
        opts.updated_ats.after(args.updated_after)
    if args.updated_before:
        opts.updated_ats.before(args.updated_before)

    if args.app_guid:
        opts.app_guids.equal_to(*args.app_guid)
    if args.state:
        if not hasattr(opts, "states"):
            raise ValueError(f"{resource} cannot be filtered by state")
        opts.states.equal_to(*args.state)
    if args.type:
        if not hasattr(opts, "types"):
            raise ValueError(f"{resource} cannot be filtered by type")
        opts.types.equal_to(*args.type)
    return opts


def _make_parser(default_per_page: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cfclient", description="Query a Cloud Foundry v3 API")
    resources = parser.add_subparsers(dest="resource", help="Resource collection")

    for resource in _LIST_OPTIONS:
        resource_parser = resources.add_parser(resource, help=f"Work with {resource}")
        actions = resource_parser.add_subparsers(dest="action", help="Action")

        list_parser = actions.add_parser("list", help=f"List {resource} (one page)")
        list_parser.add_argument("--label", action="append", help="Label requirement, repeatable")
        list_parser.add_argument("--created-after", type=parse_timestamp, default=None)
        list_parser.add_argument("--created-before", type=parse_timestamp, default=None)
        list_parser.add_argument("--updated-after", type=parse_timestamp, default=None)
        list_parser.add_argument("--updated-before", type=parse_timestamp, default=None)
        list_parser.add_argument("--app-guid", action="append", help="Filter by app GUID, repeatable")
        list_parser.add_argument("--state", action="append", help="Filter by state, repeatable")
        list_parser.add_argument("--type", action="append", help="Filter by process type, repeatable")
        list_parser.add_argument("--order-by", type=str, default=None)
        list_parser.add_argument("--page", type=int, default=1)
        list_parser.add_argument("--per-page", type=int, default=default_per_page)
        list_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Print the request path and query string without sending it",
        )

        get_parser = actions.add_parser("get", help=f"Show one of the {resource}")
        get_parser.add_argument("guid", type=str)

    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = _make_parser(default_per_page=settings.default_per_page)
    args = parser.parse_args(argv)

    if not args.resource or not getattr(args, "action", None):
        parser.print_help()
        return 1

    try:
        if args.action == "list":
            opts = build_list_options(args.resource, args)
            if args.dry_run:
                print(f"/v3/{args.resource}?{opts.to_query_values().encode()}")
                return 0
            with build_client() as client:
                result = getattr(client, args.resource).list(opts)
        else:
            with build_client() as client:
                result = getattr(client, args.resource).get(args.guid)
    except (ValueError, CloudFoundryError, TransportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
