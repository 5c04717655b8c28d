import asyncio
import logging
from typing import Dict, List, Optional, Tuple

import requests

from ..config import ENCODE_URL, CACHE_FOLDER, REQUEST_TIMEOUT, SEARCH_FIELDS, DEFAULT_FILE_FORMAT
from .caching import _compute_json_cached
from .meta import FileReferenceSet

logger = logging.getLogger(__name__)


def _torow(hit: dict, url: str) -> Optional[Dict[str, object]]:
    """Flatten a File search hit into FileRecord attributes, None if the hit lacks any of them"""
    target = (hit.get("target") or {}).get("label")
    biosample = (hit.get("biosample_ontology") or {}).get("term_name")
    if target is None or biosample is None or "href" not in hit:
        return None
    row = {
        "accession": hit.get("accession"),
        "url": url.rstrip('/') + hit["href"],
        "target": target,
        "output_type": hit.get("output_type"),
        "biosample_name": biosample,
        "assembly": hit.get("assembly"),
        "file_format": hit.get("file_format"),
        "file_size": hit.get("file_size"),
        # "/experiments/ENCSR000BSO/" -> "ENCSR000BSO"
        "dataset": (hit.get("dataset") or "").strip('/').split('/')[-1],
    }
    return None if any(v is None for v in row.values()) else row


class EncodeCatalog:
    """
    Client for the ENCODE portal search endpoint. Every distinct query is fetched once and kept as JSON
    in the cache_folder, later calls with the same filters never reach the network
    """

    def __init__(self, cache_folder: str = CACHE_FOLDER, url: str = ENCODE_URL, timeout: float = REQUEST_TIMEOUT):
        self.cache_folder = cache_folder
        self.url = url
        self.timeout = timeout

    def _query(self, filters: Dict[str, object]) -> List[Tuple[str, object]]:
        query = [("type", "File"), ("format", "json"), ("limit", "all")]
        for key, value in sorted(filters.items()):
            if value is not None:
                query.append((key, value))
        query += [("field", f) for f in SEARCH_FIELDS]
        return query

    def _fetch(self, query: List[Tuple[str, object]]) -> list:
        logger.debug(f"GET {self.url}/search/ with {query}")
        response = requests.get(f"{self.url}/search/", params=query, timeout=self.timeout,
                                headers={'accept': 'application/json'})
        # the portal answers 404 for searches without hits
        if response.status_code == 404:
            return []
        response.raise_for_status()
        return response.json()["@graph"]

    def search(self, **filters) -> list:
        """Raw File hits matching the filters, e.g. search(assembly="GRCh38", output_type="signal p-value")"""
        query = self._query(filters)
        # the portal is a part of the cache key
        key = [("url", self.url)] + query
        return _compute_json_cached(self.cache_folder, "search", key, lambda: self._fetch(query))

    async def asearch(self, **filters) -> list:
        return await asyncio.get_event_loop().run_in_executor(None, lambda: self.search(**filters))

    def files(self, target: str = None, assembly: str = None, output_type: str = None,
              file_format: str = DEFAULT_FILE_FORMAT) -> FileReferenceSet:
        filters = {
            "target.label": target,
            "assembly": assembly,
            "output_type": output_type,
            "file_format": file_format,
            "status": "released",
        }
        hits = self.search(**filters)
        rows = [_torow(hit, self.url) for hit in hits]
        skipped = sum(r is None for r in rows)
        if skipped:
            logger.debug(f"Skipped {skipped} hits with incomplete attributes")
        files = FileReferenceSet.fromrows(r for r in rows if r is not None)
        logger.info(f"ENCODE returned {len(files)} {file_format} files for {filters}")
        return files


__all__ = ["EncodeCatalog"]
