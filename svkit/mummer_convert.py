"""Convert MUMmer show-diff output into VCF records."""

import re

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atoi(text):
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def format_mummer_entry(chrom, svtype, start, stop, length):
    """Return one VCF record line (without newline) for a MUMmer event."""
    return (
        f"{chrom}\t{start}\t{svtype}00MUMmer\tN\t<{svtype}>\t.\tLowQual\t"
        f"IMPRECISE;SVTYPE={svtype};SVMETHOD=MUMmer;CHR2={chrom};END={stop};"
        f"SVLEN={length};PE=1\tGT:GL:GQ:FT:RC:DR:DV:RR:RV\t"
    )


def convert_mummer_svs(mummer, min_len, output):
    """Write VCF records for show-diff events longer than min_len.

    Everything up to and including the first line starting with '[' is
    treated as header.
    """
    with open(mummer) as handle, open(output, "w") as out:
        lines = (raw.rstrip("\n") for raw in handle)
        if not any(line.startswith("[") for line in lines):
            return
        for line in lines:
            fields = line.split("\t")
            chrom = fields[0]
            svtype = fields[1] if len(fields) > 1 else ""
            start, stop, length = (
                _atoi(fields[index]) if len(fields) > index else 0
                for index in (2, 3, 4)
            )
            if length > min_len:
                out.write(format_mummer_entry(chrom, svtype, start, stop, length) + "\n")