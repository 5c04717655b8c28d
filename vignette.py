import logging
import matplotlib.pyplot as plt

from encsignal import EncodeCatalog, GenomicInterval, ScoredIntervalCollection, extract, plot_pair
from encsignal.annotation import nearest
from encsignal.pathways import genes_from_pathway, terms
from encsignal.utils import config_logging

ROOT = "/data/encsignal"
TARGET = "CREB1"
OUTPUT_TYPE = "signal p-value"
ASSEMBLY = "GRCh38"
BIOSAMPLES = ("HepG2", "K562")
REGION = GenomicInterval("chr17", 38_000_000, 38_100_000, ASSEMBLY)

# BED of GRCh38 genes, name in the 4th column
GENES = "/data/GRCh38/genes.bed"

config_logging(f"{ROOT}/logs", level="INFO")
logger = logging.getLogger("vignette")

# 1. all released CREB1 bigWig files on GRCh38
catalog = EncodeCatalog(cache_folder=f"{ROOT}/cache")
files = catalog.files(target=TARGET, assembly=ASSEMBLY, output_type=OUTPUT_TYPE)
logger.info(f"Biosamples with {TARGET} signal: {files.unique('biosample_name')}")

# 2. signal inside the window, only the needed bytes of every bigWig are downloaded
tracks = extract(files, TARGET, OUTPUT_TYPE, BIOSAMPLES, REGION)
for track in tracks:
    logger.info(f"{track.label}: {len(track)} intervals from {track.record.accession}")

# 3. one replicate per biosample against each other
first = {t.record.biosample_name: t for t in reversed(list(tracks))}
pair = ScoredIntervalCollection(first[b] for b in BIOSAMPLES)
ax = plot_pair(pair, log=True)
ax.set_title(f"{TARGET} at {REGION}")
plt.savefig(f"{ROOT}/{TARGET}-{'-'.join(BIOSAMPLES)}.png", dpi=150, bbox_inches='tight')

# 4. strongest signal and the gene next to it
best = max((i for t in tracks for i in t.intervals), key=lambda i: i.score)
logger.info(f"Top {OUTPUT_TYPE} {best.score:.2f} at {best.chrom}:{best.start}-{best.end}, "
            f"nearest gene {nearest(best, GENES)}")

# 5. genes of a pathway
term = terms()[0]
for gene in genes_from_pathway(term)[:10]:
    print(gene.symbol, gene.entrez, gene.name, sep='\t')
