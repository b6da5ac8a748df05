#!/usr/bin/env python3
"""
Generate tables of powers of psi, psi^(-1) and psi^(-1) * n^(-1).

Usage: psi_power_tables.py <modulus> <size> <psi>
"""

import sys

from ntt_tables.cli import psi_power_main

if __name__ == "__main__":
    sys.exit(psi_power_main())
