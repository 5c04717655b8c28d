from .terms import GOTerm, GOPW_SELECTED, goid, terms
from .lookup import Gene, MyGeneSource, genes_from_pathway
