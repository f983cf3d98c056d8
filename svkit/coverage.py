"""Turn per-position coverage tables into BED-like region lists."""

import re
import sys

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atoi(text):
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _fields(raw):
    return raw.rstrip("\n").split("\t")


def mq0_regions(lines, border, cov_thresh):
    """Yield (chrom, start, end) regions of positions covered above cov_thresh.

    A region is closed when the next covered position lies more than
    `border` away; regions are padded by `border` and start at least at 1.
    The last open region is not reported.
    """
    start = 0
    current = -1
    prev = -1
    start_chr = ""
    for raw in lines:
        fields = _fields(raw)
        chrom = fields[0]
        if len(fields) > 1:
            current = _atoi(fields[1])
        cov = _atoi(fields[2]) if len(fields) > 2 else 0
        if cov <= cov_thresh:
            continue
        if prev != -1 and abs(current - prev) > border:
            region_start = start - border if start - border > 1 else 1
            yield start_chr, region_start, prev + border
            start = current
            start_chr = chrom
        elif prev == -1:
            start = current
            start_chr = chrom
        prev = current


def comp_mq0bed(cov_file, border, cov_thresh, out=None):
    """Write the regions of an MQ0 coverage file to `out` (stdout by default)."""
    out = sys.stdout if out is None else out
    with open(cov_file) as handle:
        for chrom, start, end in mq0_regions(handle, border, cov_thresh):
            out.write(f"{chrom}\t{start}\t{end}\n")


def _bad_coverage_regions(lines, win_size, min_cov):
    unset = -win_size
    start = unset
    stop = 0
    pos = 0
    chrom = ""
    chr_prev = ""
    for raw in lines:
        fields = _fields(raw)
        chrom = fields[0]
        cov = -1
        if len(fields) > 1 and (fields[1] or len(fields) > 2):
            if chr_prev and chr_prev != chrom:
                if start != unset:
                    yield chr_prev, start, pos
                    start = unset
                    stop = 1
                chr_prev = chrom
            pos = _atoi(fields[1])
        if len(fields) > 2:
            cov = _atoi(fields[2])
        if cov <= min_cov:
            if start == unset:
                start = pos - win_size if pos - win_size > 0 else 0
                stop = pos
            if stop - pos < win_size:
                stop = pos
        elif start != unset and pos - stop > win_size:
            yield chrom, start, stop
            start = unset
            stop = pos
        chr_prev = chrom
    if start != unset:
        yield chrom, start, pos


def summarize_badcoverage(filename, win_size, min_cov, output):
    """Write regions with coverage at or below min_cov, merged within win_size.

    The first line of the input (REF POS COV header) is skipped.
    """
    with open(filename) as handle, open(output, "w") as out:
        next(handle, None)
        for chrom, start, stop in _bad_coverage_regions(handle, win_size, min_cov):
            out.write(f"{chrom}\t{start}\t{stop}\n")