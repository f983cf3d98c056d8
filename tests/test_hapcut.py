import pytest

from svkit.hapcut import parse_hapcut, process_hapcut

HAPCUT = (
    "BLOCK: offset: 1 len: 2 phased: 2\n"
    "1\t0\t1\tchr1\t100\tA\tG\t0/1\n"
    "2\t1\t0\tchr1\t200\tC\tT\t0/1\n"
    "3\t1\t1\tchr1\t250\tC\tT\t1/1\n"
    "4\t1\t0\tchr2\t50\tC\tT\t0/1\n"
    "********\n"
    "BLOCK: offset: 5 len: 1 phased: 1\n"
    "5\t1\t0\tchr1\t500\tG\tA\t0/1\n"
    "6\t0\t1\tchr2\t900\tG\tA\t0/1\n"
    "********\n"
)

HEADER = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tS1"


@pytest.fixture
def hapcut_file(tmp_path):
    path = tmp_path / "phased.txt"
    path.write_text(HAPCUT)
    return path


def record(chrom, pos, gt):
    return f"{chrom}\t{pos}\t.\tA\tG\t50\tPASS\t.\tGT\t{gt}"


def test_parse_hapcut_blocks_and_signs(hapcut_file):
    phased, next_id = parse_hapcut(hapcut_file, "chr1", 1)
    assert phased == {"chr1_100": -1, "chr1_200": 1, "chr1_500": 2}
    assert next_id == 3


def test_parse_hapcut_skips_homozygous_and_other_chromosomes(hapcut_file):
    phased, _ = parse_hapcut(hapcut_file, "chr1", 1)
    assert "chr1_250" not in phased
    assert all(key.startswith("chr1_") for key in phased)


def test_parse_hapcut_block_ids_continue_from_given_start(hapcut_file):
    first, next_id = parse_hapcut(hapcut_file, "chr1", 1)
    second, final_id = parse_hapcut(hapcut_file, "chr2", next_id)
    assert set(second) == {"chr2_50", "chr2_900"}
    assert min(abs(v) for v in second.values()) > max(abs(v) for v in first.values())
    assert final_id == next_id + 2
    assert second["chr2_900"] < 0 < second["chr2_50"]


def test_parse_hapcut_keeps_first_duplicate(tmp_path):
    path = tmp_path / "dup.txt"
    path.write_text(
        "BLOCK: x\n1\t1\t0\tchr1\t10\n********\n2\t0\t1\tchr1\t10\n********\n"
    )
    phased, _ = parse_hapcut(path, "chr1", 1)
    assert phased == {"chr1_10": 1}


def test_process_hapcut_phases_records(tmp_path, hapcut_file):
    snps = tmp_path / "snps.vcf"
    snps.write_text(
        "##fileformat=VCFv4.2\n"
        + HEADER + "\n"
        + record("chr1", 100, "0/1") + "\n"
        + record("chr1", 200, "0/1") + "\n"
        + record("chr1", 300, "1/1") + "\n"
        + record("chr1", 400, "0/1") + "\n"
    )
    out = tmp_path / "out.vcf"
    process_hapcut(snps, hapcut_file, out)
    lines = out.read_text().splitlines()
    assert lines[0] == "##fileformat=VCFv4.2"
    assert lines[1].startswith("##FORMAT=<ID=PS")
    assert lines[2] == HEADER
    assert lines[3] == "chr1\t100\t.\tA\tG\t50\tPASS\t.\tGT:PS\t0|1:1"
    assert lines[4] == "chr1\t200\t.\tA\tG\t50\tPASS\t.\tGT:PS\t1|0:1"
    assert lines[5] == record("chr1", 300, "1/1")
    assert lines[6] == record("chr1", 400, "0/1")
    assert len(lines) == 7


def test_process_hapcut_second_chromosome(tmp_path, hapcut_file):
    snps = tmp_path / "snps.vcf"
    snps.write_text(
        HEADER + "\n"
        + record("chr1", 500, "1/0") + "\n"
        + record("chr2", 50, "0/1") + "\n"
    )
    out = tmp_path / "out.vcf"
    process_hapcut(snps, hapcut_file, out)
    lines = out.read_text().splitlines()
    first_ps = int(lines[2].rsplit(":", 1)[1])
    second_ps = int(lines[3].rsplit(":", 1)[1])
    assert lines[2].endswith("GT:PS\t1|0:2")
    assert second_ps > first_ps
    assert "\tGT:PS\t1|0:" in lines[3]