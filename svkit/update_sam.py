"""Append fields of unmapped SAM reads to their mapped counterparts."""

_CHUNK = 1000


def _read_id(line):
    return line.split("\t", 1)[0]


def update_entries(entries, unmapped_sam):
    """Return a copy of {read_id: mapped_line} extended from the unmapped SAM.

    For every unmapped record whose id is present, everything after its
    tenth tab is appended to the mapped line.
    """
    updated = dict(entries)
    with open(unmapped_sam) as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("@"):
                continue
            read_id = _read_id(line)
            if read_id in updated:
                fields = line.split("\t")
                if len(fields) > 10:
                    updated[read_id] += "\t".join(fields[10:])
    return updated


def _flush(entries, unmapped_sam, out):
    for _, line in sorted(update_entries(entries, unmapped_sam).items()):
        out.write(line + "\n")


def process_sam_forpacbio(unmapped_sam, mapped_sam, output_sam):
    """Write the mapped records, sorted by read id in chunks, with unmapped fields added.

    Header lines are not written.
    """
    entries = {}
    with open(mapped_sam) as handle, open(output_sam, "w") as out:
        for raw in handle:
            line = raw.rstrip("\n")
            if line.startswith("@"):
                continue
            entries[_read_id(line)] = line
            if len(entries) > _CHUNK:
                _flush(entries, unmapped_sam, out)
                entries = {}
        _flush(entries, unmapped_sam, out)