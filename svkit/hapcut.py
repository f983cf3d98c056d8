"""Transfer phasing from a phased-SNP blocks file onto the original SNP VCF."""

import re
import sys

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_PS_HEADER = (
    '##FORMAT=<ID=PS,Number=1,Type=Integer,Description="Phase set identifier">\n'
)
_HETEROZYGOUS = (("0", "1"), ("1", "0"))


def _atoi(text):
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _rest(line, index):
    """Return the line from the start of column `index`, or '' if absent."""
    fields = line.split("\t")
    if index >= len(fields):
        return ""
    return "\t".join(fields[index:])


def _allele_set(line, index):
    rest = _rest(line, index)
    return rest[0] != "0" if rest else True


def parse_hapcut(hapcut2, target_chr, phaseblock_id):
    """Read the phased heterozygous SNPs of one chromosome.

    Returns ({"CHR_POS": block_id}, next_block_id). The block id is
    negative when the first haplotype carries the reference allele. Every
    '*' separator line advances the block id, whatever the chromosome.
    """
    phased = {}
    with open(hapcut2) as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("B"):
                continue
            if line.startswith("*"):
                phaseblock_id += 1
                continue
            fields = line.split("\t")
            chrom = fields[3] if len(fields) > 3 else ""
            if chrom != target_chr:
                continue
            first_gt = _allele_set(line, 1)
            second_gt = _allele_set(line, 2)
            if first_gt == second_gt:
                continue
            rest = _rest(line, 4)
            pos = _atoi(rest) if rest else -1
            key = f"{chrom}_{pos}"
            if key in phased:
                print(f"A position was found twice: {key}", file=sys.stderr)
                continue
            phased[key] = phaseblock_id if first_gt else -phaseblock_id
    return phased, phaseblock_id


def _phase(line, found, block):
    if found < 0:
        raise ValueError("record has no sample column to phase")
    line = line[:found] + ":PS" + line[found:]
    found += 3
    genotype = "1|0" if block > 0 else "0|1"
    line = line[:found + 1] + genotype + line[found + 4:]
    return f"{line}:{abs(block)}"


def process_hapcut(orig_snp, hapcut2, output):
    """Write the SNP VCF with heterozygous calls phased and tagged with PS.

    Records found in the phasing file get ':PS' added to FORMAT, their
    genotype replaced by 1|0 or 0|1 and the phase set id appended.
    """
    phased = {}
    old_chr = ""
    phaseblock = 1
    with open(orig_snp) as handle, open(output, "w") as out:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("#"):
                if line[1:2] == "C":
                    out.write(_PS_HEADER)
                out.write(line + "\n")
                continue
            found = line.rfind("\t")
            genotype = (line[found + 1:found + 2], line[found + 3:found + 4])
            if genotype in _HETEROZYGOUS:
                chrom = line.split("\t", 1)[0]
                rest = _rest(line, 1)
                pos = _atoi(rest) if rest else 0
                if chrom != old_chr:
                    print(f"Parsing hapcut2 output for {chrom}", end="")
                    phased, phaseblock = parse_hapcut(hapcut2, chrom, phaseblock)
                    print(f" SNPs parsed {len(phased)}")
                    old_chr = chrom
                if chrom:
                    block = phased.get(f"{chrom}_{pos}")
                    if block is not None:
                        line = _phase(line, found, block)
            out.write(line + "\n")