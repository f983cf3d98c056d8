"""Pairwise overlap matrix of samples from a merged multi-sample VCF file."""

_SUPP_VEC = "SUPP_VEC="


def parse_supp_vec(text):
    """Return the indices of '1' in a support vector, up to the first ';'."""
    vector = text.split(";", 1)[0]
    return [index for index, char in enumerate(vector) if char == "1"]


def _header_names(line):
    names = line.split("\t")[9:]
    if names and line.endswith("\t"):
        names.pop()
    return names


def _record_ids(line):
    fields = line.split("\t")
    if len(fields) < 8:
        return []
    info_start = len("\t".join(fields[:7])) + 1
    info_end = info_start + len(fields[7])
    position = line.rfind(_SUPP_VEC, info_start, info_end)
    if position < 0:
        return []
    return parse_supp_vec(line[position + len(_SUPP_VEC):])


def overlap_matrix(filename):
    """Count, for every pair of samples, the records supported by both.

    Returns (names, matrix). The matrix is square, sized by the number of
    sample names known when the first record is read; the diagonal holds
    the number of records each sample supports.
    """
    names = []
    matrix = []
    with open(filename) as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("#C"):
                names.extend(_header_names(line))
                continue
            if line.startswith("#"):
                continue
            ids = _record_ids(line)
            if not matrix:
                matrix = [[0] * len(names) for _ in names]
            size = len(matrix)
            outside = [index for index in ids if index >= size]
            if outside:
                raise ValueError(
                    f"support vector index {outside[0]} exceeds the "
                    f"{size} samples of the header"
                )
            for first in ids:
                row = matrix[first]
                for second in ids:
                    row[second] += 1
    return names, matrix


def _format_cell(matrix, i, j, normalize):
    if not normalize:
        return str(matrix[i][j])
    diagonal = matrix[i][i]
    value = matrix[i][j] / diagonal if diagonal > 0 else 0.0
    return f"{value:e}"


def summary_venn(filename, normalize, output):
    """Write the pairwise overlap matrix of a merged VCF file to `output`.

    With `normalize`, each row is divided by its diagonal entry (rows with
    an empty diagonal are written as zeros). Every value is followed by a
    tab. Returns the raw count matrix.
    """
    _, matrix = overlap_matrix(filename)
    size = len(matrix)
    with open(output, "w") as out:
        for i in range(size):
            cells = "".join(
                _format_cell(matrix, i, j, normalize) + "\t" for j in range(size)
            )
            out.write(cells + "\n")
    return matrix