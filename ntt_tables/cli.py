"""
Command-line drivers

    psi-power-tables <modulus> <size> <psi>
    shoup-tables <modulus> <size> <psi>
    find-psi [<modulus> <size>]

Tables go to stdout, parameters and errors to stderr.
"""

import logging
import os
import re
import sys

from .emit import power_table_name, shoup_table_name, write_table
from .errors import (
    ModulusOutOfRange,
    ParameterError,
    RootOutOfRange,
    SizeOutOfRange,
)
from .modarith import power
from .params import (
    check_modulus_and_size,
    check_power_of_two,
    find_psi,
    validate_parameters,
)
from .tables import SHOUP, build_shoup_table, psi_power_tables

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

LOG_LEVEL_ENV = "NTT_TABLES_LOG_LEVEL"

DECIMAL = re.compile(r"[+-]?[0-9]+")

# (q, n, description) searched by find-psi when called without arguments
PARAM_SETS = [
    (7681, 256, "Kyber-like"),
    (12289, 512, "BLISS-I"),
    (12289, 1024, "NewHope"),
    (7681, 4, "Toy n=4"),
]


def setup_logging():
    """Send ntt_tables diagnostics to stderr as bare messages"""
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logging.getLogger("ntt_tables").setLevel(level)


def _split_argv(argv):
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "ntt-tables"
    return prog, list(argv)


def _parse_int(text, error, what):
    # int() also takes "1_7" and non-ASCII digits
    if not DECIMAL.fullmatch(text.strip()):
        raise error(f"Invalid {what} {text}: not a decimal integer")
    return int(text, 10)


def parse_parameters(args):
    """Parse <modulus> <size> <psi> into integers"""
    q = _parse_int(args[0], ModulusOutOfRange, "modulus")
    n = _parse_int(args[1], SizeOutOfRange, "size")
    psi = _parse_int(args[2], RootOutOfRange, "psi")
    return q, n, psi


def log_parameters(params, with_inverse_psi=True):
    q = params.q
    logger.info("Parameters")
    logger.info("q = %d", q)
    logger.info("n = %d", params.n)
    logger.info("psi = %d", params.psi)
    logger.info("psi^2 = %d", params.phi)
    if with_inverse_psi:
        logger.info("psi^(-1) = %d", params.inv_psi)
        logger.info("psi^(-2) = %d", (params.inv_psi * params.inv_psi) % q)
    logger.info("n^(-1) = %d", params.inv_n)


def _load_parameters(prog, args, power_of_two=False):
    if len(args) != 3:
        logger.error("Usage: %s <modulus> <size> <psi>", prog)
        return None
    try:
        q, n, psi = parse_parameters(args)
        params = validate_parameters(q, n, psi)
        if power_of_two:
            check_power_of_two(n)
    except ParameterError as exc:
        logger.error("%s", exc)
        return None
    return params


def psi_power_main(argv=None):
    """Print psi^i, psi^(-i) and psi^(-i) * n^(-1) tables"""
    setup_logging()
    prog, args = _split_argv(argv)

    params = _load_parameters(prog, args)
    if params is None:
        return EXIT_FAILURE

    log_parameters(params)
    for prefix, table in psi_power_tables(params).items():
        write_table(sys.stdout, power_table_name(prefix, params.q, params.n), table)
    return EXIT_SUCCESS


def shoup_main(argv=None):
    """Print the Shoup-style table of powers of phi = psi^2"""
    setup_logging()
    prog, args = _split_argv(argv)

    params = _load_parameters(prog, args, power_of_two=True)
    if params is None:
        return EXIT_FAILURE

    log_parameters(params, with_inverse_psi=False)
    table = build_shoup_table(params.n, params.q, params.phi)
    write_table(sys.stdout, shoup_table_name(SHOUP, params.n, params.q), table)
    return EXIT_SUCCESS


def find_psi_main(argv=None):
    """Print a valid psi for <modulus> <size>, or for PARAM_SETS"""
    setup_logging()
    prog, args = _split_argv(argv)

    if len(args) == 2:
        try:
            q = _parse_int(args[0], ModulusOutOfRange, "modulus")
            n = _parse_int(args[1], SizeOutOfRange, "size")
            check_modulus_and_size(q, n)
        except ParameterError as exc:
            logger.error("%s", exc)
            return EXIT_FAILURE

        logger.info("Searching for psi (primitive %d-th root of unity), n=%d, q=%d", 2 * n, n, q)
        psi = find_psi(q, n)
        if psi is None:
            logger.error("No psi found for n=%d, q=%d", n, q)
            return EXIT_FAILURE
        logger.info("psi^%d mod %d = %d", n, q, power(psi, n, q))
        print(psi)
        return EXIT_SUCCESS

    if args:
        logger.error("Usage: %s [<modulus> <size>]", prog)
        return EXIT_FAILURE

    for q, n, desc in PARAM_SETS:
        psi = find_psi(q, n)
        if psi is None:
            print(f"{desc}: n={n}, q={q}: no psi")
            continue
        print(f"{desc}: n={n}, q={q}, psi={psi}, psi^2={(psi * psi) % q}")
    return EXIT_SUCCESS
