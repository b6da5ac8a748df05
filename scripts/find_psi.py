#!/usr/bin/env python3
"""
Find a primitive 2n-th root of unity psi for NWC NTT parameters.

Usage: find_psi.py [<modulus> <size>]
"""

import sys

from ntt_tables.cli import find_psi_main

if __name__ == "__main__":
    sys.exit(find_psi_main())
