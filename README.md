# svkit

A small Python library for working with structural variant (SV) calls:
converting caller output to VCF, summarizing multi-sample VCF files, turning
coverage tables into region lists and ranking samples by how many SVs they
capture. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `svkit.lumpy`: `parse_bedpe_line` reads one BEDPE line into a
  `BedpeRecord`; `BedpeRecord.to_vcf` renders it as a VCF record;
  `print_header`, `parse_lumpy` and `process_lumpy` write a whole VCF file
  from a BEDPE file.
- `svkit.mummer_convert`: `format_mummer_entry` and `convert_mummer_svs`
  turn MUMmer show-diff events longer than a minimum length into VCF records.
- `svkit.coverage`: `mq0_regions` and `comp_mq0bed` bin an MQ0 coverage file
  into padded regions; `summarize_badcoverage` writes regions whose coverage
  is at or below a threshold.
- `svkit.venn`: `parse_supp_vec`, `overlap_matrix` and `summary_venn` build a
  pairwise sample overlap matrix from the `SUPP_VEC` tags of a merged VCF,
  optionally normalized by its diagonal.
- `svkit.select_samples`: `genotype_present`, `count_matrix` and
  `select_greedy` rank samples greedily by the number of new SVs they add.
- `svkit.summ_mat`: `pattern_histogram`, `parse_inf`,
  `summarize_svs_table_window` and `summarize_svs_table_window_stream` count
  sharing patterns of calls across samples within genomic windows.
- `svkit.giab_summary`: `parse_vec`, `parse_results` and `summary_giab` add
  technology, sample and caller support counts to the INFO column.
- `svkit.hapcut`: `parse_hapcut` and `process_hapcut` phase heterozygous SNPs
  of a VCF from a phased-blocks file and add a `PS` tag.
- `svkit.correct_allele`: `eval_sv`, `read_entries` and `correct_alleles`
  reset genotypes to `1/1` or `0/0` from a junction-test evaluation table.
- `svkit.divergence`: `StrainSV`, `get_stop`, `parse_strains`,
  `detect_divergence` and `format_report` mark deletions and duplications
  shared by the two strains of a two-sample file.
- `svkit.update_sam`: `update_entries` and `process_sam_forpacbio` append the
  trailing fields of unmapped SAM reads to their mapped records.

## Example

```python
from svkit.lumpy import parse_bedpe_line

record = parse_bedpe_line("chr1\t100\t101\tchr1\t500\t501\tDEL\t0.5\t+\t-\tinfo")
print(record.to_vcf(0))
```

## What it does not do

There is no command-line program: every tool is a function to be called from
Python. The package does not simulate SVs or reads, does not merge VCF files,
and does not summarize gene or population annotations of SVs.