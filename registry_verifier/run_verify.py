#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for verifying the data tree of a registry repository."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .checks.address import AddressChecker
from .checks.ownership import OwnershipResolver
from .config import VerifierConfig
from .exceptions import RepositoryRootError, VerifierError
from .schema.registry import SchemaRegistry
from .validator.report import Diagnostic, DiagnosticCategory, ValidationReport
from .validator.tree_validator import validate_tree

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Ok: all files match schema definitions!"


def check_repository_root(root: Path) -> None:
    """Ensure ``root`` is the top of a git checkout.

    Raises:
        RepositoryRootError: If ``root`` holds no ``.git`` entry.
    """
    if not (Path(root) / ".git").exists():
        raise RepositoryRootError("script should be run in the root of the repo.")


def verify(
    config: VerifierConfig,
    ownership_resolver=None,
    address_checker: Optional[AddressChecker] = None,
) -> ValidationReport:
    """Load the schemas once and validate the whole data tree.

    Raises:
        VerifierError: On any fatal condition (not a repository root,
            unreadable schema directory, broken schema file).
    """
    root = config.root_path
    check_repository_root(root)

    address_checker = address_checker or AddressChecker()
    if ownership_resolver is None:
        ownership_resolver = OwnershipResolver(root)

    registry = SchemaRegistry.load(config.schema_path, address_checker)
    logger.debug(f"Schemas: {', '.join(registry.identifiers)}")

    return validate_tree(config.data_path, registry, ownership_resolver, address_checker, config)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    if diagnostic.category == DiagnosticCategory.SCHEMA_VIOLATION:
        return f" - {diagnostic.keyword}: {diagnostic.data_path} {diagnostic.message}"
    return f"Error: {diagnostic.message}"


def render_report(report: ValidationReport, output_format: str = "human") -> None:
    """Print ``report`` in the requested output format."""
    if output_format == "json":
        output = {
            "valid": report.valid,
            "errors": len(report.diagnostics),
            "diagnostics": [d.to_dict() for d in report.diagnostics],
        }
        print(json.dumps(output, indent=2))
    elif output_format == "github-actions":
        for diagnostic in report.diagnostics:
            if diagnostic.category == DiagnosticCategory.SCHEMA_VIOLATION:
                message = f"{diagnostic.keyword}: {diagnostic.data_path} {diagnostic.message}"
            else:
                message = diagnostic.message
            print(f"::error file={diagnostic.path}::{message}")
    else:  # human-readable
        for diagnostic in report.diagnostics:
            # per-violation detail lines go to stdout
            if diagnostic.category == DiagnosticCategory.SCHEMA_VIOLATION:
                logger.info(format_diagnostic(diagnostic))
            else:
                logger.error(format_diagnostic(diagnostic))
        if report.valid:
            logger.info(SUCCESS_MESSAGE)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Verify registry data files against their JSON schemas, '
                    'address checksums and CODEOWNERS',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--root',
        default=None,
        help='Repository root (default: current directory)',
    )
    parser.add_argument(
        '--schema-dir',
        default=None,
        help='Schema directory, relative to the root (default: schema)',
    )
    parser.add_argument(
        '--data-dir',
        default=None,
        help='Data directory, relative to the root (default: data)',
    )
    parser.add_argument(
        '--codeowners',
        default=None,
        help='Explicit CODEOWNERS file (default: looked up under the root)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the verifier CLI."""
    args = build_parser().parse_args(argv)

    config = VerifierConfig.from_env()
    if args.root is not None:
        config.root_dir = args.root
    if args.schema_dir is not None:
        config.schema_dir = args.schema_dir
    if args.data_dir is not None:
        config.data_dir = args.data_dir
    if args.verbose:
        config.log_level = "DEBUG"
    config.set_logging()

    try:
        ownership_resolver = None
        if args.codeowners:
            ownership_resolver = OwnershipResolver.from_file(config.root_path, Path(args.codeowners))
        report = verify(config, ownership_resolver=ownership_resolver)
    except (VerifierError, OSError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    render_report(report, args.format)

    # Exit with error code if any diagnostics were found
    if not report.valid:
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
