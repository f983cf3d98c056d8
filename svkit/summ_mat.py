"""Summarise sharing patterns of SV calls across samples in genomic windows."""

import re
import sys
from collections import Counter

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_SUPP_VEC = "SUPP_VEC="


def _atoi(text):
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _fields_with_offsets(line):
    offset = 0
    for index, value in enumerate(line.split("\t")):
        if offset >= len(line):
            break
        yield index, offset, value
        offset += len(value) + 1


def pattern_histogram(mat):
    """Count how often each column pattern of `mat` repeats.

    Columns are read across all rows; the result lists, for k from 1 to
    width - 1, how many distinct patterns occur exactly k times.
    """
    width = len(mat[0])
    patterns = Counter(
        "".join(row[column] if column < len(row) else "" for row in mat)
        for column in range(width)
    )
    frequencies = Counter(patterns.values())
    return [frequencies[k] for k in range(1, width)]


def parse_inf(field):
    """Return '0' if the field (up to tab or newline) contains 'NaN', else '1'."""
    value = re.split(r"[\t\n]", field, maxsplit=1)[0]
    return "0" if "NaN" in value else "1"


def _write_windows(rows, window, out):
    last_pos = 0
    last_chr = ""
    mat = []
    for chrom, pos, pattern in rows:
        if pos is not None and (pos - last_pos > window or chrom != last_chr):
            if mat:
                counts = "".join(f"{value};" for value in pattern_histogram(mat))
                out.write(f"{last_chr}:{last_pos}:{counts}\n")
                mat = []
            last_pos = pos
            last_chr = chrom
        mat.append(pattern)


def _table_row(line):
    chrom = line.split("\t", 1)[0]
    pos = None
    pattern = []
    for index, offset, value in _fields_with_offsets(line):
        if index == 1:
            pos = _atoi(line[offset:])
        elif index > 9:
            pattern.append(parse_inf(value))
    return chrom, pos, "".join(pattern)


def _vcf_row(line):
    chrom = line.split("\t", 1)[0]
    pos = None
    pattern = []
    for index, offset, value in _fields_with_offsets(line):
        if index == 1:
            pos = _atoi(line[offset:])
        elif index == 7:
            found = value.rfind(_SUPP_VEC)
            if found >= 0:
                start = offset + found + len(_SUPP_VEC)
                pattern = [line[start:].split(";", 1)[0]]
        elif index > 8:
            rest = line[offset:]
            pattern.append("1" if rest[0] == "1" or rest[2:3] == "1" else "0")
    return chrom, pos, "".join(pattern)


def _records(lines, parse):
    for raw in lines:
        line = raw.rstrip("\n")
        if not line.startswith("#"):
            yield parse(line)


def summarize_svs_table_window(venn_file, window, output):
    """Write pattern histograms of a sample table for each genomic window.

    The first line is skipped; sample columns start at the eleventh field
    and a 'NaN' in a column counts as absent. The last window is not written.
    """
    with open(venn_file) as handle, open(output, "w") as out:
        next(handle, None)
        _write_windows(_records(handle, _table_row), window, out)


def summarize_svs_table_window_stream(window, output, stream=None):
    """Write pattern histograms of a multi-sample VCF read from `stream`.

    The pattern of a record is its SUPP_VEC followed by one flag per sample
    whose genotype carries a '1'. Reads standard input by default.
    """
    stream = sys.stdin if stream is None else stream
    with open(output, "w") as out:
        _write_windows(_records(stream, _vcf_row), window, out)