"""Annotate merged SV calls with technology, sample and caller support."""

_TECHS = ("10X", "Bio", "CG", "Ill", "PB")
_SAMPLES = ("HG2", "HG3", "HG4")
_CALLERS = (
    "allpass", "assemblyticsfalcon", "assemblyticsPBcR", "bkscan", "breakseq",
    "cnvnatorlowcov", "commonlaw", "Cortex", "delly", "FB", "fermikitraw",
    "fermikitsv", "GATKHC", "GATKHCSBGrefine", "hap1kb", "HySA", "Krunchall",
    "lumpy", "manta", "MetaSV", "MSPacMonboth", "parliament", "PB10Xdip",
    "PBHoneyBaylor", "pbsv", "pindelpass", "scalpel", "smrtsvdip",
    "snifflesngmlr", "Spiral", "SpiralSDKrefine", "svaba", "SvEvents",
    "SVrefine10Xhap1", "SVrefine10Xhap12", "SVrefine10Xhap2",
    "SVrefineDISCOVAR", "SVrefineDISCOVARDovetail", "SVrefineFalcon1",
    "SVrefineFalcon1Dovetail", "SVrefineFalcon2", "SVrefineFalcon2Bionano",
    "SVrefinePBcR", "SVrefinePBcRDovetail", "tardis", "tnscope", "vcfBeta",
)
_ASSEMBLY_CALLERS = frozenset({"assemblyticsfalcon", "assemblyticsPBcR", "SVrefine"})
_SUPP_VEC = "SUPP_VEC="


def parse_vec(text):
    """Return the indices of '1' in a support vector, up to the first ';'."""
    vector = text.split(";", 1)[0]
    return [index for index, char in enumerate(vector) if char == "1"]


def _increment(counts, key):
    counts[key] = counts.get(key, 0) + 1


def _section(counts):
    present = sum(1 for value in counts.values() if value > 0)
    listed = "".join(f",{key}:{value}" for key, value in sorted(counts.items()))
    return f"tot:{present}{listed}"


def parse_results(res):
    """Summarise a ';'-terminated list of SAMPLE_TECH_CALLER names as INFO tags."""
    tech = dict.fromkeys(_TECHS, 0)
    mendelian = dict.fromkeys(_SAMPLES, 0)
    method = dict.fromkeys(_CALLERS, 0)
    assembly = 0
    mapping = 0

    *chunks, _ = res.split(";")
    offset = 0
    for chunk in chunks:
        parts = chunk.split("_")
        sample = parts[0]
        tech_str = ""
        if len(parts) > 1:
            start = offset + len(sample) + 1
            tech_str = res[start:start + 2]
            third = res[start + 2:start + 3]
            if third != "_":
                tech_str += third
        caller = ""
        if len(parts) > 2:
            caller = parts[2] + ("_" if len(parts) > 3 else "")
        offset += len(chunk) + 1

        _increment(mendelian, sample)
        _increment(tech, tech_str)
        _increment(method, caller)
        if caller in _ASSEMBLY_CALLERS:
            assembly += 1
        else:
            mapping += 1

    return (
        f";TECH={_section(tech)}"
        f";MEND={_section(mendelian)}"
        f";Callers={_section(method)}"
        f";METHODS=Assembly:{assembly},Mapping:{mapping}"
    )


def _header_names(header):
    fields = header.split("\t")
    return fields[9:] if len(fields) > 9 else [""]


def summary_giab(filename, output):
    """Rewrite the records of a merged VCF with support summaries in INFO.

    Header lines are dropped; records without SUPP_VEC are dropped too.
    """
    with open(filename) as handle:
        lines = iter([raw.rstrip("\n") for raw in handle])
    with open(output, "w") as out:
        header = next(lines, "")
        while header[1:2] == "#":
            header = next(lines, "")
        names = _header_names(header)

        pending = ""
        for line in lines:
            if line.startswith("#"):
                continue
            fields = line.split("\t")
            if len(fields) < 8:
                continue
            info_start = len("\t".join(fields[:7])) + 1
            position = line.find(_SUPP_VEC, info_start)
            if position < 0:
                continue
            pending += "".join(
                names[index] + ";"
                for index in parse_vec(line[position + len(_SUPP_VEC):])
            )
            found = line.find(";")
            if found < 0:
                continue
            out.write(line[:found] + parse_results(pending) + line[found:] + "\n")
            pending = ""