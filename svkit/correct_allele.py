"""Reset SV genotypes from a breakpoint PCR evaluation table."""

import re

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _atof(text):
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _read_lines(path):
    with open(path) as handle:
        return [line.rstrip("\n") for line in handle]


def eval_sv(is_deletion, p22, p32, ratio22, ratio32):
    """Decide whether an SV is confirmed by the two junction tests.

    Both p-values must be below 1e-10 and both ratios below 0.2 for
    deletions, or below 1.8 for duplications.
    """
    significant = p22 < 1e-10 and p32 < 1e-10
    limit = 0.2 if is_deletion else 1.8
    return significant and ratio22 < limit and ratio32 < limit


def read_entries(table):
    """Read the evaluation table into {sv_id: {sample: confirmed}}.

    The table is in deletion mode when the third character of its first
    line is 'E', otherwise in duplication mode.
    """
    lines = _read_lines(table)
    if not lines:
        return {}
    header = lines[0]
    is_deletion = len(header) > 2 and header[2] == "E"
    entries = {}
    for line in lines:
        fields = line.split("\t")
        if len(fields) < 8 or not (fields[7] or len(fields) > 8):
            continue
        p22, p32, ratio22, ratio32 = (_atof(value) for value in fields[4:8])
        confirmed = eval_sv(is_deletion, p22, p32, ratio22, ratio32)
        entries.setdefault(fields[0], {})[fields[2]] = confirmed
    return entries


def _genotype(confirmed):
    return "1/1" if confirmed else "0/0"


def correct_alleles(vcf_file, table, output):
    """Rewrite the genotypes of a VCF file from the evaluation table.

    Records whose TYPE.CHROM.POS key appears in the table get every sample
    genotype replaced by 1/1 (confirmed) or 0/0; other records are copied.
    """
    entries = read_entries(table)
    lines = iter(_read_lines(vcf_file))
    with open(output, "w") as out:
        header = None
        for line in lines:
            out.write(line + "\n")
            if not line.startswith("##"):
                header = line
                break
        if header is None:
            return
        names = [name for name in header.split("\t")[9:] if name]

        for line in lines:
            fields = line.split("\t")
            if len(fields) < 9 or not (fields[8] or len(fields) > 9):
                continue
            sv_type = fields[4].replace("<", "").replace(">", "")
            key = f"{sv_type}.{fields[0]}.{fields[1]}"
            calls = entries.get(key)
            if calls is None:
                out.write(line + "\n")
                continue
            samples = fields[9:]
            corrected = [
                _genotype(calls.get(name, False)) + sample[3:]
                for name, sample in zip(names, samples)
            ]
            corrected.extend(samples[len(names):])
            out.write("\t".join(fields[:9] + corrected) + "\n")