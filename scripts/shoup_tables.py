#!/usr/bin/env python3
"""
Generate the Shoup-style twiddle table for an iterative Cooley-Tukey NTT.

Usage: shoup_tables.py <modulus> <size> <psi>
"""

import sys

from ntt_tables.cli import shoup_main

if __name__ == "__main__":
    sys.exit(shoup_main())
