import pytest

from encsignal.catalog import FileRecord, FileReferenceSet
from encsignal.config import METADATA_COLUMNS

ROW = {
    "accession": "ENCFF001", "url": "https://example.org/ENCFF001.bigWig", "target": "CREB1",
    "output_type": "signal p-value", "biosample_name": "HepG2", "assembly": "GRCh38",
    "file_format": "bigWig", "file_size": "2048", "dataset": "ENCSR000AAA",
}


class TestFileRecord:
    def test_fromrow(self):
        record = FileRecord.fromrow(ROW)
        assert record.file_size == 2048
        assert record.asdict()["biosample_name"] == "HepG2"

    def test_missing_attribute(self):
        row = dict(ROW)
        del row["target"]
        with pytest.raises(ValueError, match="target"):
            FileRecord.fromrow(row)

    def test_bad_size(self):
        with pytest.raises(ValueError):
            FileRecord.fromrow(dict(ROW, file_size="large"))

    def test_extra_attributes_ignored(self):
        assert FileRecord.fromrow(dict(ROW, lab="some lab")) == FileRecord.fromrow(ROW)


class TestFileReferenceSet:
    def test_subset_returns_new_set(self, fileset):
        subset = fileset.subset(target="CREB1", output_type="signal p-value", biosamples=["MCF-7"])
        assert len(subset) == 1 and subset[0].accession == "ENCFF003"
        assert len(fileset) == 5

    def test_subset_without_filters(self, fileset):
        assert fileset.subset() == fileset

    def test_unique(self, fileset):
        assert fileset.unique("biosample_name") == ["HepG2", "MCF-7", "A549"]

    def test_slice(self, fileset):
        assert isinstance(fileset[1:3], FileReferenceSet)
        assert [r.accession for r in fileset[1:3]] == ["ENCFF002", "ENCFF003"]

    def test_rows_roundtrip(self, fileset):
        assert FileReferenceSet.fromrows(fileset.torows()) == fileset

    def test_fromtsv(self, tmp_path):
        header = list(METADATA_COLUMNS.keys()) + ["Lab"]
        values = {
            "File accession": "ENCFF100", "File download URL": "https://example.org/ENCFF100.bigWig",
            "Experiment target": "CREB1-human", "Output type": "signal p-value",
            "Biosample term name": "K562", "File assembly": "GRCh38", "File format": "bigWig",
            "Size": "4096", "Experiment accession": "ENCSR100AAA", "Lab": "somelab",
        }
        path = tmp_path / "metadata.tsv"
        path.write_text("\t".join(header) + "\n" + "\t".join(values[h] for h in header) + "\n")

        files = FileReferenceSet.fromtsv(str(path))
        assert len(files) == 1
        assert files[0].target == "CREB1"
        assert files[0].biosample_name == "K562"
        assert files[0].file_size == 4096

    def test_fromtsv_missing_columns(self, tmp_path):
        path = tmp_path / "metadata.tsv"
        path.write_text("File accession\tOutput type\nENCFF100\tsignal p-value\n")
        with pytest.raises(ValueError, match="lacks columns"):
            FileReferenceSet.fromtsv(str(path))
