#!/usr/bin/env python3
"""
tools [-c Biology] [-o tools.tsv]
List the available tools grouped by category.
"""

import argparse
import sys

from utools import catalog, utils
from utools.__init__ import VERSION

logger = utils.get_logger(__name__)


def format_catalog(category=None) -> str:
    """
    >>> print(format_catalog())
    Biology
      🧬 Reverse Complement (reverse-complement)
         Compute the reverse complement of a DNA sequence for molecular biology work
    """
    grouped = catalog.tools_by_category()
    if category is not None:
        if category not in grouped:
            raise ValueError(f"Unknown category: {category}. Choose from: {', '.join(grouped)}")
        grouped = {category: grouped[category]}

    lines = []
    for name, tools in grouped.items():
        lines.append(name)
        for tool in tools:
            lines.append(f"  {tool['icon']} {tool['name']} ({tool['id']})")
            lines.append(f"     {tool['description']}")
    return "\n".join(lines)


@utils.add_log
def write_table(output_file, category=None):
    df = catalog.to_dataframe()
    if category is not None:
        df = df[df["category"] == category]
    df.to_csv(output_file, sep="\t", index=False)
    write_table.logger.info(f"{len(df)} tools written to {output_file}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="List the available utility tools.")
    parser.add_argument("-c", "--category", help="Only list tools in this category")
    parser.add_argument("-o", "--output", help="Also write the catalog as a tsv file")
    parser.add_argument("-v", "--version", action="version", version=f"{VERSION}")
    args = parser.parse_args(argv)

    try:
        print(format_catalog(args.category))
    except ValueError as e:
        logger.error(e)
        sys.exit(1)
    if args.output:
        write_table(args.output, args.category)


if __name__ == "__main__":
    main()
