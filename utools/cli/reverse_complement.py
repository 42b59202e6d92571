#!/usr/bin/env python3
"""
reverse-complement ATCGATCG
Print the reverse complement of a DNA sequence.
"""

import argparse
import sys

from utools import sequence, utils
from utools.__init__ import VERSION

logger = utils.get_logger(__name__)


def format_result(seq: str) -> str:
    """
    >>> print(format_result("ATCGATCG"))
    Input sequence: ATCGATCG (8 bp)
    Complement: TAGCTAGC
    Reverse complement: CGATCGAT (8 bp)
    """
    seq = sequence.validate_sequence(seq)
    rc = sequence.reverse_complement(seq)
    lines = [
        f"Input sequence: {seq} ({utils.seq_len_str(seq)})",
        f"Complement: {sequence.complement(seq)}",
        f"Reverse complement: {rc} ({utils.seq_len_str(rc)})",
    ]
    return "\n".join(lines)


def run(seq: str, quiet=False):
    if quiet:
        print(sequence.reverse_complement(seq))
    else:
        print(format_result(seq))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reverse complement of a DNA sequence (A, T, G, C only).")
    parser.add_argument("sequence", help="DNA sequence, e.g. ATCGATCG. Case is preserved.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print the reverse complement")
    parser.add_argument("-v", "--version", action="version", version=f"{VERSION}")
    args = parser.parse_args(argv)

    try:
        run(args.sequence, quiet=args.quiet)
    except sequence.ValidationError as e:
        logger.error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
