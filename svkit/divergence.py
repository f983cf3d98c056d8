"""Detect SVs shared between two strains of a two-sample VCF file."""

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_DOTS = re.compile(r"(?=\.\.)")
_TYPES = {"TRA": 3, "INV": 2, "DUP": 1, "DEL": 0}


def _atoi(text):
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class StrainSV:
    """One SV called in a strain."""

    chrom: str
    start: int
    stop: int
    sv_type: int
    joined: bool = False


def get_stop(field):
    """Return (stop, sv_type) parsed from an ID such as 'DEL..1500'.

    The type comes from the first three characters (-1 if unknown); the
    stop is the number after the last '..'.
    """
    sv_type = _TYPES.get(field[:3], -1)
    stop = 0
    for match in _DOTS.finditer(field, 3):
        stop = _atoi(field[match.start() + 2:])
    return stop, sv_type


def parse_strains(path, call):
    """Return the SVs whose genotype column 3 + call carries a '1' allele."""
    column = 3 + call
    strains = []
    with open(path) as handle:
        for raw in handle:
            fields = raw.rstrip("\n").split("\t")
            if len(fields) <= column:
                continue
            rest = "\t".join(fields[column:])
            if len(rest) > 2 and rest[2] == "1":
                stop, sv_type = get_stop(fields[2])
                strains.append(StrainSV(fields[0], _atoi(fields[1]), stop, sv_type))
    return strains


def detect_divergence(path, percent_overlap):
    """Mark deletions and duplications shared by both strains as joined.

    Returns the two lists of SVs (first and second strain).
    """
    p1 = parse_strains(path, 0)
    p2 = parse_strains(path, 1)
    for first in p1:
        if first.sv_type not in (0, 1):
            continue
        for second in p2:
            if first.sv_type != second.sv_type or first.chrom != second.chrom:
                continue
            if (first.start < second.start < first.stop
                    or first.start < second.stop < first.stop):
                dist = min(first.stop, second.stop) - max(first.start, second.start)
                length = max(first.stop - first.start, second.stop - second.start)
                if dist / length > percent_overlap:
                    first.joined = True
                    second.joined = True
    return p1, p2


def format_report(p1, p2):
    """Render the joined/not-joined report for both strains."""
    parts = []
    for title, strain in (("P1:", p1), ("P2:", p2)):
        parts.append(title + "\n")
        for sv in strain:
            status = "Joined " if sv.joined else "NOT    "
            parts.append(f"\t{status}{sv.start} {sv.stop} {sv.sv_type}\n")
    return "".join(parts)