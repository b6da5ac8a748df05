"""
Print tables as C arrays

Output layout (consumed by generated C sources, must not change):

    const int32_t name[n] = {
        1,     2,     4,     8,    16,    32,    64,   128,
      ...
    };
"""

VALUES_PER_ROW = 8
FIELD_WIDTH = 5
ROW_MARGIN = "   "


def power_table_name(prefix, q, n):
    """Name of a power table, e.g. psi_powers_ntt12289n512"""
    return f"{prefix}{q}n{n}"


def shoup_table_name(prefix, n, q):
    """Name of a Shoup table, e.g. shoup_ntt512_12289"""
    return f"{prefix}{n}_{q}"


def format_table(name, table):
    n = len(table)
    lines = [f"\nconst int32_t {name}[{n}] = {{\n"]

    k = 0
    for value in table:
        if k == 0:
            lines.append(ROW_MARGIN)
        lines.append(f" {int(value):{FIELD_WIDTH}d},")
        k += 1
        if k == VALUES_PER_ROW:
            lines.append("\n")
            k = 0
    if k > 0:
        lines.append("\n")

    lines.append("};\n\n")
    return "".join(lines)


def write_table(stream, name, table):
    stream.write(format_table(name, table))
