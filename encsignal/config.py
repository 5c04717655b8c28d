# Global options for querying ENCODE and extracting bigWig signal

ENCODE_URL = "https://www.encodeproject.org"

DEFAULT_TARGET = "CREB1"
DEFAULT_OUTPUT_TYPE = "signal p-value"
DEFAULT_BIOSAMPLES = ("HepG2", "K562", "GM12878")
DEFAULT_FILE_FORMAT = "bigWig"

ASSEMBLY = "GRCh38"
DEFAULT_CHROM = "chr17"
DEFAULT_START = 38_000_000
DEFAULT_END = 38_100_000

CACHE_FOLDER = "/tmp/encsignal/"
REQUEST_TIMEOUT = 60

# concurrent remote reads
THREADS = 4

# Attributes requested from the ENCODE search endpoint, one field= parameter each
SEARCH_FIELDS = (
    "accession",
    "href",
    "output_type",
    "assembly",
    "file_format",
    "file_size",
    "dataset",
    "target.label",
    "biosample_ontology.term_name",
)

# ENCODE batch download metadata.tsv -> FileRecord field
METADATA_COLUMNS = {
    "File accession": "accession",
    "File download URL": "url",
    "Experiment target": "target",
    "Output type": "output_type",
    "Biosample term name": "biosample_name",
    "File assembly": "assembly",
    "File format": "file_format",
    "Size": "file_size",
    "Experiment accession": "dataset",
}
