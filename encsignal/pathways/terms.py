from typing import NamedTuple


class GOTerm(NamedTuple):
    goid: str
    term: str


# Pathway related biological process terms offered for gene lookup
GOPW_SELECTED = (
    GOTerm("GO:0000165", "MAPK cascade"),
    GOTerm("GO:0006096", "glycolytic process"),
    GOTerm("GO:0006099", "tricarboxylic acid cycle"),
    GOTerm("GO:0006915", "apoptotic process"),
    GOTerm("GO:0007165", "signal transduction"),
    GOTerm("GO:0007173", "epidermal growth factor receptor signaling pathway"),
    GOTerm("GO:0007179", "transforming growth factor beta receptor signaling pathway"),
    GOTerm("GO:0007186", "G protein-coupled receptor signaling pathway"),
    GOTerm("GO:0007219", "Notch signaling pathway"),
    GOTerm("GO:0007224", "smoothened signaling pathway"),
    GOTerm("GO:0008286", "insulin receptor signaling pathway"),
    GOTerm("GO:0016055", "Wnt signaling pathway"),
    GOTerm("GO:0030509", "BMP signaling pathway"),
    GOTerm("GO:0031929", "TOR signaling"),
    GOTerm("GO:0035329", "hippo signaling"),
)

_BYTERM = {t.term: t.goid for t in GOPW_SELECTED}
assert len(_BYTERM) == len(GOPW_SELECTED)


def goid(term: str) -> str:
    """GO identifier of one of the selected pathway terms"""
    if term not in _BYTERM:
        raise KeyError(f"{term!r} is not among the selected pathway terms")
    return _BYTERM[term]


def terms() -> [str]:
    return [t.term for t in GOPW_SELECTED]


__all__ = ["GOTerm", "GOPW_SELECTED", "goid", "terms"]
