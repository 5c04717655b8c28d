import logging
from typing import Iterable, Mapping, NamedTuple, Optional, Protocol

import mygene

from .terms import goid

logger = logging.getLogger(__name__)


class Gene(NamedTuple):
    goid: str
    symbol: str
    name: str
    entrez: str


class GeneSource(Protocol):
    def genes(self, goid: str) -> Iterable[Mapping[str, object]]:
        """Hits with symbol, name and entrezgene keys for genes annotated to goid"""
        ...


class MyGeneSource:
    """Human genes directly annotated to a GO term, queried from mygene.info"""

    def __init__(self, species: str = "human", client: mygene.MyGeneInfo = None):
        self.species = species
        self.client = client if client is not None else mygene.MyGeneInfo()

    def genes(self, goid: str) -> Iterable[Mapping[str, object]]:
        query = " OR ".join(f'go.{branch}.id:"{goid}"' for branch in ("BP", "MF", "CC"))
        logger.debug(f"mygene query {query}")
        return self.client.query(query, species=self.species, fields="symbol,name,entrezgene", fetch_all=True)


def genes_from_pathway(term: str, source: Optional[GeneSource] = None) -> [Gene]:
    """
    Genes annotated to one of the selected pathway terms, one row per gene sorted by symbol
    :param term: GO term name, see pathways.terms()
    :param source: gene annotation source, mygene.info by default
    """
    tag = goid(term)
    source = MyGeneSource() if source is None else source

    genes = {}
    for hit in source.genes(tag):
        symbol = hit.get("symbol")
        if not symbol or symbol in genes:
            continue
        entrez = hit.get("entrezgene")
        genes[symbol] = Gene(tag, str(symbol), str(hit.get("name", "")), "" if entrez is None else str(entrez))
    logger.info(f"{len(genes)} genes annotated to {tag} ({term})")
    return sorted(genes.values(), key=lambda g: g.symbol)


__all__ = ["Gene", "GeneSource", "MyGeneSource", "genes_from_pathway"]
