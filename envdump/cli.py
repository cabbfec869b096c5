"""
Environment export CLI

Dumps the DynamoDB tables, S3 buckets and Cognito users of one environment
into local files under the output root.

Usage:
    envdump <env_name> [all|dynamodb|s3|cognito] [--output-root DIR] [--profile NAME]
"""

import argparse
import logging
import sys
from pathlib import Path

from envdump.config import DEFAULT_OUTPUT_ROOT, DEFAULT_PROFILE, ExportConfig, Mode
from envdump.errors import ExportError
from envdump.runner import run

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="envdump",
        description="Export an environment's DynamoDB tables, S3 buckets and Cognito users to local files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Everything for the dev environment into ../output
  envdump dev

  # Only the DynamoDB tables, reading just the first scan page like the old tool
  envdump dev dynamodb --single-page

  # Show the targets and output paths without calling AWS
  envdump staging --dry-run
        """,
    )
    parser.add_argument("env_name", help="Environment name used in table, bucket and parameter names")
    parser.add_argument(
        "mode",
        nargs="?",
        default=Mode.ALL.value,
        choices=[m.value for m in Mode],
        help="Which stores to export (default: all)",
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=DEFAULT_OUTPUT_ROOT,
        help=f"Directory receiving the dynamodb/, s3/ and cognito/ trees (default: {DEFAULT_OUTPUT_ROOT})",
    )
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help=f"AWS shared-config profile (default: {DEFAULT_PROFILE})",
    )
    parser.add_argument("--region", help="AWS region (default: from the profile)")
    parser.add_argument(
        "--single-page",
        action="store_true",
        help="Read only the first page of every scan and listing",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log what would be exported without making any AWS calls",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ExportConfig:
    return ExportConfig(
        env_name=args.env_name,
        mode=Mode(args.mode),
        output_root=args.output_root,
        profile=args.profile,
        region=args.region,
        paginate=not args.single_page,
        dry_run=args.dry_run,
    )


def main(argv: list[str] | None = None) -> None:
    """Main execution function."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config = build_config(args)
    logger.info(
        f"Exporting environment '{config.env_name}' ({config.mode.value}) to {config.output_root} "
        f"using profile {config.profile!r}, region {config.region or 'from profile'}"
    )

    try:
        summary = run(config)
    except ExportError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"✓ Export completed: {len(summary.written)} files written")


if __name__ == "__main__":
    main()
