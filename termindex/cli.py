#!/usr/bin/env python3
"""
termindex CLI Interface
Inspect the embedded vocabulary index and probe tokens against it
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from termindex.core.config import TermIndexConfig
from termindex.core.index import TermIndex
from termindex.core.probe import might_contain, probe
from termindex.core.registry import build_default_index

console = Console()


class TermIndexCLI:
    """Command-line interface for the term index"""

    def __init__(self, config: Optional[TermIndexConfig] = None):
        self.config = config or TermIndexConfig()
        self.index: TermIndex = build_default_index(self.config)

    def probe_tokens(self, tokens: List[str]) -> int:
        """Probe each token and print a result table. Returns number of matches."""
        table = Table(title="Probe results")
        table.add_column("Token", style="cyan")
        table.add_column("Pre-check")
        table.add_column("Key", style="green")
        table.add_column("Kind")
        table.add_column("Brief")

        matches = 0
        for token in tokens:
            passed = might_contain(self.index, token)
            record = probe(self.index, token)
            if record is not None:
                matches += 1
                table.add_row(token, "✅ maybe", record.key, record.kind or "-", record.brief)
            elif passed:
                # Pre-check passed but the exact table had no match
                table.add_row(token, "⚠️  maybe", "-", "-", "[yellow]filtered false positive[/yellow]")
            else:
                table.add_row(token, "❌ no", "-", "-", "")

        console.print(table)
        return matches

    def show_stats(self):
        """Print index statistics"""
        index = self.index
        lookup_only = len(index) - len(set(index.text_keys.values()))

        table = Table(show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        table.add_row("Terms", str(len(index)))
        table.add_row("Probeable texts", str(len(index.text_keys)))
        table.add_row("Lookup-only terms", str(lookup_only))
        table.add_row("Digest", f"{index.algorithm} ({index.width * 8} bits)")
        table.add_row("Bits set", f"{index.popcount()} / {index.width * 8}")
        table.add_row("Density", f"{index.density():.2%}")
        table.add_row("Fingerprint", index.fingerprint_hex())

        console.print(Panel(table, title="📊 Term index"))

    def list_terms(self):
        """Print every term in the vocabulary"""
        table = Table(title=f"Vocabulary ({len(self.index)} terms)")
        table.add_column("Key", style="green")
        table.add_column("Text", style="cyan")
        table.add_column("Kind")
        table.add_column("Brief")

        for key in sorted(self.index.terms):
            record = self.index.terms[key]
            table.add_row(key, record.text or "[dim]-[/dim]", record.kind or "-", record.brief)

        console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="termindex - acronym and jargon recognition index",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Probe tokens
  termindex --probe ATO xyz devsecops

  # Index statistics
  termindex --stats

  # List the vocabulary
  termindex --list
        """
    )

    parser.add_argument(
        "--probe", "-p",
        nargs="+",
        metavar="TOKEN",
        help="Tokens to look up"
    )

    parser.add_argument(
        "--stats", "-s",
        action="store_true",
        help="Show fingerprint statistics"
    )

    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List vocabulary terms"
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )

    args = parser.parse_args(argv)

    try:
        config = TermIndexConfig.load_from_file(args.config) if args.config else TermIndexConfig()
    except ValueError as e:
        console.print(f"❌ {e}", style="red")
        return 1

    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))

    cli = TermIndexCLI(config)

    if args.stats:
        cli.show_stats()

    if args.list:
        cli.list_terms()

    if args.probe:
        cli.probe_tokens(args.probe)

    if not any([args.stats, args.list, args.probe]):
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
