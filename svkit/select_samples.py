"""Greedy selection of samples that capture the most SVs of a population VCF."""

from collections import Counter

_HEADER = "Sample\t#SVs\t#_SVs_captured\t%_SVs_captured\n"


def genotype_present(field):
    """Return True when a genotype (or rest of line) starts with 0/1 or 1/1."""
    return field[2:3] == "1" and field[0:1] in ("0", "1")


def _sample_columns(line):
    fields = line.split("\t")
    offset = sum(len(field) + 1 for field in fields[:9])
    for index, field in enumerate(fields[9:]):
        if offset >= len(line):
            break
        yield index, line[offset:]
        offset += len(field) + 1


def count_matrix(vcf_file, taken):
    """Count, per sample, the SVs not shared with any sample in `taken`.

    Returns (names, counts, total) where total is the number of records.
    """
    names = []
    counter = Counter()
    total = 0
    with open(vcf_file) as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("#C"):
                if not names:
                    names = [name for name in line.split("\t")[9:] if name]
                continue
            if line.startswith("#"):
                continue
            total += 1
            called = set()
            include = False
            for index, rest in _sample_columns(line):
                if genotype_present(rest):
                    if index in taken:
                        include = False
                        break
                    include = True
                    called.add(index)
            if include:
                counter.update(called)
    counts = [counter[index] for index in range(len(names))]
    return names, counts, total


def select_greedy(vcf_file, output):
    """Rank samples greedily by the number of new SVs they capture.

    Writes the ranking to `output` and returns its rows as
    (sample, new_svs, captured_svs, captured_fraction) tuples.
    """
    taken = set()
    names, counts, total = count_matrix(vcf_file, taken)
    rows = []
    captured = 0
    with open(output, "w") as out:
        out.write(_HEADER)
        for rank in range(len(names)):
            best = 0
            best_id = -1
            for index, count in enumerate(counts):
                if best < count:
                    best = count
                    best_id = index
            captured += best
            fraction = captured / total if total else float("nan")
            name = names[best_id] if best_id >= 0 else ""
            print(f"RANK:\t{rank}\t{name}\t{best}\t{captured}\t{fraction:g}")
            out.write(f"{name}\t{best}\t{captured}\t{fraction:f}\n")
            rows.append((name, best, captured, fraction))
            if best == 0:
                break
            taken.add(best_id)
            names, counts, total = count_matrix(vcf_file, taken)
    return rows