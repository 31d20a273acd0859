#!/usr/bin/env python3
"""
Main entry point for building the category tree.

Usage:
    domain-tree [data_dir] [--output-dir DIR] [--fetch]
    python3 -m domain_tree.main [data_dir]
"""

import argparse
import sys
from typing import List, Optional

from .analyzer import CategoryAnalyzer
from .errors import DirectoryNotFound, DomainTreeError
from .models import ConflictPolicy
from .reporter import BuildReporter
from .tree import TreeRenderer, render_ascii
from .tree.templates import DEFAULT_SOURCE_URL
from .utils import DirectoryDataset, FileSink, GitDataset
from .utils.dataset import DEFAULT_REPO_URL


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Build the include hierarchy of a domain-list-community data directory "
                    "and export it as JSON and interactive HTML."
    )
    parser.add_argument('data_dir', nargs='?', default='data', help='Directory of category files (default: data)')
    parser.add_argument('--output-dir', '-o', default='.', help='Directory for the generated files (default: .)')
    parser.add_argument('--json-name', default='domain_tree.json', help='JSON output file name')
    parser.add_argument('--html-name', default='domain_tree.html', help='HTML output file name')
    parser.add_argument('--report', help='Also write a JSON build report to this path')
    parser.add_argument('--fetch', action='store_true', help='Clone the upstream repository into data_dir first')
    parser.add_argument('--repo-url', default=DEFAULT_REPO_URL, help='Repository to clone with --fetch')
    parser.add_argument('--source-url', default=DEFAULT_SOURCE_URL,
                        help="URL pattern for per-category source links ('{name}' is replaced)")
    parser.add_argument('--no-source-links', action='store_true', help='Omit source links from the HTML page')
    parser.add_argument('--strict', action='store_true',
                        help='Fail when a category is included by more than one parent')
    parser.add_argument('--no-console', action='store_true', help='Do not print the ASCII tree')
    parser.add_argument('--include-warnings', action='store_true', help='List individual build warnings')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Build the tree, print it, and export both artifacts."""
    args = parse_args(argv)

    print("🌳 Domain List Community tree builder")
    print("=" * 50)

    if args.fetch:
        dataset = GitDataset(args.data_dir, repo_url=args.repo_url)
    else:
        dataset = DirectoryDataset(args.data_dir)

    policy = ConflictPolicy.REJECT if args.strict else ConflictPolicy.LAST_WRITER_WINS
    renderer = TreeRenderer(source_url=None if args.no_source_links else args.source_url)

    try:
        data_dir = dataset.prepare()
        analyzer = CategoryAnalyzer(data_dir, policy=policy, renderer=renderer)
        results = analyzer.build()
    except DomainTreeError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        if isinstance(e, DirectoryNotFound) and not args.fetch:
            print("   Run with --fetch to clone the upstream dataset.", file=sys.stderr)
        return 1

    if not args.no_console:
        print(render_ascii(results.forest))

    outcomes = analyzer.export(
        results,
        FileSink(args.output_dir),
        json_name=args.json_name,
        html_name=args.html_name,
    )

    reporter = BuildReporter(report_file=args.report)
    success = reporter.report_results(results, outcomes, include_warnings=args.include_warnings)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
