"""Command-line entry point for catalog maintenance workflows.

Usage:
  door-catalog-ops reconcile-photos [--policy POLICY] [--dry-run]
  door-catalog-ops sweep-placeholders [--dry-run]
  door-catalog-ops check-photo-links [--sample N]
  door-catalog-ops seed-catalog-tree [--ids-out PATH]
  door-catalog-ops purge-door-products [--cutoff ISO] [--dry-run]
  door-catalog-ops verify-listing [BASE_URL]
  door-catalog-ops refresh-listing-cache [BASE_URL]
  door-catalog-ops inspect-workbook [PATH]

Exit status is 0 on success and 1 on any failure.
"""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from door_catalog_ops.app_logging import configure_logging
from door_catalog_ops.config import Settings, parse_cutoff
from door_catalog_ops.containers import (
    OpsContainer,
    build_container,
    open_container,
    open_listing_service,
)
from door_catalog_ops.domain.errors import ApiResponseError, PreconditionError
from door_catalog_ops.domain.photos import ReconciliationPolicy
from door_catalog_ops.services.workbook import inspect_workbook

_logger = logging.getLogger(__name__)

ContainerFactory = Callable[[Settings | None], OpsContainer]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per workflow."""
    parser = argparse.ArgumentParser(
        prog="door-catalog-ops",
        description="Maintenance commands for the door configurator catalog.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    reconcile = commands.add_parser(
        "reconcile-photos", help="Converge cover photo paths per color key"
    )
    reconcile.add_argument(
        "--policy",
        choices=[policy.value for policy in ReconciliationPolicy],
        default=ReconciliationPolicy.VERIFY_AND_CONVERGE.value,
        help="verify-and-converge checks files on disk; prefer-local trusts "
        "recorded /uploads/ paths and only rewrites external URLs",
    )
    reconcile.add_argument("--uploads-root", type=Path, help="public/uploads dir")
    reconcile.add_argument("--dry-run", action="store_true")

    sweep = commands.add_parser(
        "sweep-placeholders", help="Replace marked photo paths with the placeholder"
    )
    sweep.add_argument("--dry-run", action="store_true")

    links = commands.add_parser(
        "check-photo-links", help="HEAD-check a sample of external cover URLs"
    )
    links.add_argument("--sample", type=int, default=15)

    seed = commands.add_parser("seed-catalog-tree", help="Create the category tree")
    seed.add_argument("--ids-out", type=Path, help="Where to write category ids")

    purge = commands.add_parser(
        "purge-door-products", help="Delete door products created after a cutoff"
    )
    purge.add_argument("--cutoff", help="ISO date; products at or after it go")
    purge.add_argument("--dry-run", action="store_true")

    verify = commands.add_parser(
        "verify-listing", help="Sanity-check the complete-data API"
    )
    verify.add_argument("base_url", nargs="?")

    refresh = commands.add_parser(
        "refresh-listing-cache", help="Clear the complete-data cache"
    )
    refresh.add_argument("base_url", nargs="?")

    workbook = commands.add_parser(
        "inspect-workbook", help="List sheets and header columns of an export"
    )
    workbook.add_argument("path", nargs="?", type=Path)
    return parser


def main(
    argv: Sequence[str] | None = None,
    settings: Settings | None = None,
    container_factory: ContainerFactory = build_container,
) -> int:
    """Run a maintenance command and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        resolved_settings = _apply_overrides(settings or Settings(), args)
        if not args.verbose:
            configure_logging(resolved_settings.log_level)
        return asyncio.run(_dispatch(args, resolved_settings, container_factory))
    except PreconditionError as exc:
        _logger.error("%s", exc)
    except ApiResponseError as exc:
        _logger.error("API error %s: %s", exc.status_code, exc.body)
    except Exception:
        _logger.exception("Command %s failed", args.command)
    return 1


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    updates: dict[str, object] = {}
    if getattr(args, "base_url", None):
        updates["base_url"] = args.base_url
    if getattr(args, "uploads_root", None):
        updates["uploads_root"] = args.uploads_root
    if getattr(args, "path", None):
        updates["workbook_path"] = args.path
    if getattr(args, "ids_out", None):
        updates["catalog_ids_path"] = args.ids_out
    return settings.model_copy(update=updates) if updates else settings


async def _dispatch(
    args: argparse.Namespace, settings: Settings, factory: ContainerFactory
) -> int:
    if args.command == "verify-listing":
        return await _verify_listing(settings)
    if args.command == "refresh-listing-cache":
        return await _refresh_listing_cache(settings)
    if args.command == "inspect-workbook":
        return _inspect_workbook(settings)

    async with open_container(settings, factory) as container:
        if args.command == "reconcile-photos":
            return _reconcile_photos(container, args)
        if args.command == "sweep-placeholders":
            return _sweep_placeholders(container, args)
        if args.command == "check-photo-links":
            return await _check_photo_links(container, args)
        if args.command == "seed-catalog-tree":
            return _seed_catalog_tree(container)
        if args.command == "purge-door-products":
            return _purge_door_products(container, args)
    raise ValueError(f"Unknown command: {args.command}")


def _reconcile_photos(container: OpsContainer, args: argparse.Namespace) -> int:
    policy = ReconciliationPolicy(args.policy)
    report = container.reconciliation_service.reconcile(policy, dry_run=args.dry_run)
    print(f"Policy: {report.policy.value}")
    print(f"Color keys total: {report.total_groups}")
    print(f"Keys with local image: {report.groups_with_local}")
    if policy is ReconciliationPolicy.VERIFY_AND_CONVERGE:
        print(f"Keys with placeholder fallback: {report.groups_with_placeholder}")
    else:
        print(f"Keys without local image: {report.groups_unresolved}")
    print(f"Rows updated: {report.updated_rows}")
    if report.dry_run:
        print("(dry run, database unchanged)")
    return 0


def _sweep_placeholders(container: OpsContainer, args: argparse.Namespace) -> int:
    report = container.sweep_service.sweep(dry_run=args.dry_run)
    print(f"Problematic paths before: {report.before}")
    print(f"Updated: {report.updated}")
    print(f"Problematic paths after: {report.after}")
    if report.dry_run:
        print("(dry run, database unchanged)")
    elif report.after:
        print("Sweep incomplete: marked paths remain")
        return 1
    return 0


async def _check_photo_links(container: OpsContainer, args: argparse.Namespace) -> int:
    results = await container.link_check_service.check(sample_size=args.sample)
    if not results:
        print("No external photo URLs found.")
        return 0
    for result in results:
        status = "OK" if result.ok else "FAIL"
        detail = result.error or f"{result.status_code} {result.content_type or ''}"
        print(f"[{status}] {result.property_value}: {result.url} ({detail.strip()})")
    failed = sum(1 for result in results if not result.ok)
    print(f"OK: {len(results) - failed}, failed: {failed}")
    return 0


def _seed_catalog_tree(container: OpsContainer) -> int:
    ids = container.catalog_seed_service.seed()
    out_path = container.settings.catalog_ids_path
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(ids, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Category ids saved to {out_path}")
    print(json.dumps(ids, ensure_ascii=False, indent=2))
    return 0


def _purge_door_products(container: OpsContainer, args: argparse.Namespace) -> int:
    report = container.purge_service.purge(
        parse_cutoff(args.cutoff), dry_run=args.dry_run
    )
    print(f"Keeping products created before {report.cutoff.isoformat()}: {report.kept}")
    print(f"Products created at or after cutoff: {report.matched}")
    if report.matched == 0:
        print("Nothing to delete.")
    elif report.dry_run:
        print(f"Dry run, nothing deleted. Sample SKUs: {report.sample_skus}")
    else:
        print(f"Deleted: {report.deleted}")
    return 0


async def _verify_listing(settings: Settings) -> int:
    async with open_listing_service(settings) as service:
        summary = await service.verify()
    print("GET /api/catalog/doors/complete-data")
    print(f"Models: {summary.total_models}")
    print(f"Styles: {len(summary.styles)} {', '.join(summary.styles[:5])}")
    print(f"Sizes across models: {summary.total_products}")
    if summary.first_model_key is not None:
        print(
            f"Sample model: {summary.first_model_key} "
            f"sizes={summary.first_model_sizes} coatings={summary.first_model_coatings}"
        )
    print("OK")
    return 0


async def _refresh_listing_cache(settings: Settings) -> int:
    async with open_listing_service(settings) as service:
        result = await service.refresh_cache()
    print(f"complete-data cache cleared: {result}")
    return 0


def _inspect_workbook(settings: Settings) -> int:
    outlines = inspect_workbook(settings.workbook_path)
    print(f"Sheets: {[outline.name for outline in outlines]}")
    for outline in outlines:
        print(f"--- {outline.name} ---")
        print(f"Columns: {len(outline.headers)}")
        for index, header in outline.headers:
            print(f"  {index} {header}")
    return 0


if __name__ == "__main__":
    run()
