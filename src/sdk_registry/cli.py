# Copyright (c) 2025 adcl.io
# All Rights Reserved.
#
# This software is proprietary and confidential. Unauthorized copying,
# distribution, or use of this software is strictly prohibited.

"""
Command-line interface.

    sdk-registry available                    # SDK types
    sdk-registry available jdk                # distributions of a type
    sdk-registry available jdk temurin        # versions, grouped by major
    sdk-registry available jdk temurin 21     # versions of major 21
    sdk-registry patterns [--type jdk]        # loaded pattern sets
    sdk-registry extract PATH [--type T | --distribution D]
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import AppConfig, load_config
from .errors import SDKRegistryError
from .grouping import available_majors, filter_by_major, group_by_major, sort_semantic
from .logging import configure_logging, log_event
from .models import ResolvedAsset
from .pattern_loader import load_extractor
from .patterns import PatternExtractor
from .service import fetch_available_versions

logger = logging.getLogger(__name__)


def _emit_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def _print_versions(assets: List[ResolvedAsset], sdk_type: str, distribution: str) -> None:
    groups = group_by_major(asset.version for asset in assets)

    print("Available versions:")
    print("-" * 25)
    for major, versions in groups.items():
        print(f"- {major}:")
        for version in versions:
            print(f"    {version}")
        print()

    print("To install a specific version:")
    print(f"   sdk-registry install {sdk_type} {distribution} [version]")


def cmd_available(args: argparse.Namespace, config: AppConfig) -> int:
    """List SDK types, distributions, or versions depending on arguments."""
    output: Dict[str, Any] = {}

    if not args.sdk_type:
        output["types"] = config.sdk_type_names()
        if args.json:
            _emit_json(output)
        elif output["types"]:
            print("Available SDK types:")
            for sdk_type in output["types"]:
                print(f"  {sdk_type}")
        else:
            print("No SDK types available")
        return 0

    valid_types = config.sdk_type_names()
    if args.sdk_type not in valid_types:
        raise SDKRegistryError(
            f"invalid SDK type '{args.sdk_type}'. Available types: {', '.join(valid_types)}"
        )

    if not args.distribution:
        output["distributions"] = config.distributions(args.sdk_type)
        if args.json:
            _emit_json(output)
        else:
            print(f"Available {args.sdk_type} distributions:")
            for dist in output["distributions"]:
                print(f"  {dist}")
        return 0

    valid_dists = config.distributions(args.sdk_type)
    if args.distribution not in valid_dists:
        raise SDKRegistryError(
            f"invalid distribution '{args.distribution}' for type '{args.sdk_type}'. "
            f"Available distributions: {', '.join(valid_dists)}"
        )

    repo = config.get_repository(args.distribution)
    registry = config.get_registry(repo.registry)
    extractor = load_extractor(config.general.patterns_file)

    assets = fetch_available_versions(
        repo,
        registry,
        extractor,
        timeout=config.general.http_timeout
    )
    log_event(
        logger, "versions_resolved", level="DEBUG",
        distribution=args.distribution, count=len(assets)
    )

    if args.major:
        filtered = filter_by_major(assets, args.major)
        if not filtered:
            majors = ", ".join(str(m) for m in available_majors(a.version for a in assets))
            raise SDKRegistryError(
                f"No version found matching major version {args.major}. "
                f"Available major versions are: {majors}"
            )
        assets = filtered

    assets = sort_semantic(assets)

    if args.json:
        output["versions"] = [asset.to_dict() for asset in assets]
        _emit_json(output)
    else:
        _print_versions(assets, args.sdk_type, args.distribution)
    return 0


def cmd_patterns(args: argparse.Namespace, config: AppConfig) -> int:
    """List loaded pattern sets."""
    extractor = load_extractor(config.general.patterns_file)
    if args.type:
        pattern_sets = extractor.patterns_by_type(args.type)
    else:
        pattern_sets = extractor.list_patterns()

    if args.json:
        _emit_json({"patterns": [ps.to_dict() for ps in pattern_sets]})
        return 0

    for ps in pattern_sets:
        print(f"{ps.name} [{ps.sdk_type}] {ps.description}")
        for regex in ps.patterns:
            print(f"    {regex}")
    return 0


def _extract(extractor: PatternExtractor, args: argparse.Namespace):
    if args.distribution:
        return extractor.extract_by_distribution(args.path, args.distribution)
    if args.type:
        return extractor.extract_by_type(args.path, args.type)
    return extractor.extract_any(args.path)


def cmd_extract(args: argparse.Namespace, config: AppConfig) -> int:
    """Show which pattern set (if any) extracts a version from a path."""
    extractor = load_extractor(config.general.patterns_file)
    extraction = _extract(extractor, args)

    if args.json:
        _emit_json({
            "path": args.path,
            "version": extraction.version if extraction else None,
            "pattern": extraction.pattern_name if extraction else None,
        })
    elif extraction:
        print(f"{extraction.version} (pattern: {extraction.pattern_name})")
    else:
        print(f"No pattern matched for path: {args.path}")

    return 0 if extraction else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdk-registry",
        description="Resolve installable SDK versions from a remote registry"
    )
    parser.add_argument("-c", "--config", help="Path to sdkregistry.toml")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    available = subparsers.add_parser("available", help="List available SDK versions")
    available.add_argument("sdk_type", nargs="?", help="SDK type (e.g. jdk)")
    available.add_argument("distribution", nargs="?", help="Distribution (e.g. temurin)")
    available.add_argument("major", nargs="?", help="Major version to show (e.g. 21)")
    available.set_defaults(handler=cmd_available)

    patterns = subparsers.add_parser("patterns", help="List version patterns")
    patterns.add_argument("--type", help="Only pattern sets for this SDK type")
    patterns.set_defaults(handler=cmd_patterns)

    extract = subparsers.add_parser("extract", help="Extract a version from a path")
    extract.add_argument("path", help="Listing path or URL")
    scope = extract.add_mutually_exclusive_group()
    scope.add_argument("--type", help="Only pattern sets for this SDK type")
    scope.add_argument("--distribution", help="Only the named pattern set")
    extract.set_defaults(handler=cmd_extract)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        general = config.general
        configure_logging(
            log_level="DEBUG" if args.verbose else general.log_level,
            log_format=general.log_format,
            log_path=general.log_path
        )
        return args.handler(args, config)
    except SDKRegistryError as e:
        if args.json:
            _emit_json(e.to_dict())
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
