"""Convert BEDPE structural variant calls into VCF records."""

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)

_HEADER_LINES = (
    "##fileformat=VCFv4.1",
    "##fileDate=20150217",
    '##ALT=<ID=DEL,Description="Deletion">',
    '##ALT=<ID=DUP,Description="Duplication">',
    '##ALT=<ID=INV,Description="Inversion">',
    '##ALT=<ID=TRA,Description="Translocation">',
    '##ALT=<ID=INS,Description="Insertion">',
    '##FILTER=<ID=LowQual,Description="PE support below 3.">',
    '##INFO=<ID=CHR2,Number=1,Type=String,Description="Chromosome for END coordinate in case of a translocation">',
    '##INFO=<ID=END,Number=1,Type=Integer,Description="End position of the structural variant">',
    '##INFO=<ID=PE,Number=1,Type=Integer,Description="Paired-end support of the structural variant">',
    '##INFO=<ID=IMPRECISE,Number=0,Type=Flag,Description="Imprecise structural variation">',
    '##INFO=<ID=PRECISE,Number=0,Type=Flag,Description="Precise structural variation">',
    '##INFO=<ID=SVLEN,Number=1,Type=Integer,Description="Length of the SV">',
    '##INFO=<ID=SVTYPE,Number=1,Type=String,Description="Type of structural variant">',
    '##INFO=<ID=OTHER,Number=1,Type=String,Description="Type of structural variant">',
    '##INFO=<ID=SVMETHOD,Number=1,Type=String,Description="Type of approach used to detect SV">',
    '##INFO=<ID=SVSCORE,Number=1,Type=Integer,Description="Score of SV">',
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">',
)
_COLUMNS = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\t"


def _atoi(text):
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text):
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _columns(line):
    """Yield (index, value, rest_of_line) for each column starting in the line."""
    offset = 0
    for index, value in enumerate(line.split("\t")):
        if offset >= len(line):
            break
        yield index, value, line[offset:]
        offset += len(value) + 1


@dataclass
class BedpeRecord:
    """One BEDPE call: both breakpoints, type, score, strands and extra info."""

    start_chr: str = ""
    start_pos: int = 0
    stop_chr: str = ""
    stop_pos: int = 0
    svtype: str = ""
    score: float = 99.0
    strands: str = ""
    info: str = ""

    def to_vcf(self, record_id):
        """Return the VCF record line (without newline) for this call."""
        return (
            f"{self.start_chr}\t{self.start_pos}\t{self.svtype}00{record_id}"
            f"\tN\t<{self.svtype}>\t.\tPASS\tIMPRECISE;SVTYPE={self.svtype}"
            f";CHR2={self.stop_chr};END={self.stop_pos};SVSCORE={self.score:g}"
            f";SVLEN={self.stop_pos - self.start_pos};STRANDS={self.strands}"
            f";OTHER={self.info}\tGT\t./."
        )


def parse_bedpe_line(line):
    """Parse one BEDPE line into a BedpeRecord.

    Strands are the first characters of columns 9 and 10; the score
    defaults to 99 when the column is missing.
    """
    record = BedpeRecord()
    strands = []
    for index, value, rest in _columns(line):
        if index == 0:
            record.start_chr = value
        elif index == 1:
            record.start_pos = _atoi(rest)
        elif index == 3:
            record.stop_chr = value
        elif index == 4:
            record.stop_pos = _atoi(rest)
        elif index == 6:
            record.svtype = value
        elif index == 7:
            record.score = _atof(rest)
        elif index in (8, 9):
            strands.append(rest[0])
        elif index == 10:
            record.info = value
    record.strands = "".join(strands)
    return record


def print_header(name, output):
    """Write (overwriting) the VCF header with `name` as the sample column."""
    with open(output, "w") as out:
        out.write("\n".join(_HEADER_LINES) + "\n")
        out.write(f"{_COLUMNS}{name}\n")


def parse_lumpy(lumpy_bedpe, output):
    """Append one VCF record per BEDPE line to `output`; return the records."""
    records = []
    with open(lumpy_bedpe) as handle, open(output, "a") as out:
        for record_id, raw in enumerate(handle):
            record = parse_bedpe_line(raw.rstrip("\n"))
            out.write(record.to_vcf(record_id) + "\n")
            records.append(record)
    return records


def process_lumpy(lumpy_bedpe, output):
    """Convert a BEDPE file into a VCF file named `output`."""
    print_header(lumpy_bedpe, output)
    return parse_lumpy(lumpy_bedpe, output)