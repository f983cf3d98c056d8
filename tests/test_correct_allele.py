import pytest

from svkit.correct_allele import correct_alleles, eval_sv, read_entries


@pytest.mark.parametrize(
    "args, expected",
    [
        ((True, 1e-12, 1e-12, 0.1, 0.1), True),
        ((True, 0.5, 1e-12, 0.1, 0.1), False),
        ((True, 1e-12, 1e-12, 0.3, 0.1), False),
        ((False, 1e-12, 1e-12, 1.0, 1.0), True),
        ((False, 1e-12, 1e-12, 2.0, 1.0), False),
        ((False, 1e-12, 0.5, 1.0, 1.0), False),
    ],
)
def test_eval_sv(args, expected):
    assert eval_sv(*args) is expected


def _write(path, lines):
    path.write_text("".join(line + "\n" for line in lines))
    return str(path)


def test_read_entries_deletion_mode(tmp_path):
    table = _write(
        tmp_path / "table.txt",
        [
            "SVE\tinfo",
            "DEL.chr1.100\tx\tS1\tx\t1e-12\t1e-12\t0.1\t0.1",
            "DEL.chr1.100\tx\tS2\tx\t0.5\t0.5\t0.1\t0.1",
        ],
    )
    assert read_entries(table) == {"DEL.chr1.100": {"S1": True, "S2": False}}


def test_read_entries_duplication_mode(tmp_path):
    table = _write(
        tmp_path / "table.txt",
        [
            "SVX\tinfo",
            "DUP.chr2.7\tx\tS1\tx\t1e-12\t1e-12\t1.0\t1.0",
        ],
    )
    assert read_entries(table) == {"DUP.chr2.7": {"S1": True}}


def test_read_entries_skips_short_lines(tmp_path):
    table = _write(tmp_path / "table.txt", ["SVE", "id\tx\tS1\tx\t0"])
    assert read_entries(table) == {}


def test_correct_alleles(tmp_path):
    table = _write(
        tmp_path / "table.txt",
        [
            "SVE\tinfo",
            "DEL.chr1.100\tx\tS1\tx\t1e-12\t1e-12\t0.1\t0.1",
            "DEL.chr1.100\tx\tS2\tx\t0.5\t0.5\t0.1\t0.1",
        ],
    )
    header = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tS1\tS2"
    kept = "chr2\t5\tid2\tN\t<DEL>\t.\tPASS\tEND=9\tGT\t0/1\t0/1"
    vcf = _write(
        tmp_path / "in.vcf",
        [
            "##fileformat=VCFv4.1",
            header,
            "chr1\t100\tid1\tN\t<DEL>\t.\tPASS\tEND=200\tGT\t./.:5\t./.:6",
            kept,
        ],
    )
    out = tmp_path / "out.vcf"
    correct_alleles(vcf, table, str(out))
    assert out.read_text().splitlines() == [
        "##fileformat=VCFv4.1",
        header,
        "chr1\t100\tid1\tN\t<DEL>\t.\tPASS\tEND=200\tGT\t1/1:5\t0/0:6",
        kept,
    ]