import os
import json
import logging
import tempfile
from hashlib import md5
from pathlib import Path
from typing import Callable, Mapping, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Query = Union[Mapping[str, object], Sequence[Tuple[str, object]]]


def query_hash(query: Query) -> str:
    """Order independent md5 of the query parameters"""
    items = query.items() if isinstance(query, Mapping) else query
    items = sorted((str(k), str(v)) for k, v in items)
    return md5(json.dumps(items).encode()).hexdigest()


def _compute_json_cached(cache_folder: str, prefix: str, query: Query, func: Callable[[], object]):
    """Load the cached JSON result for the query or compute it with func and save"""
    path = Path(cache_folder).joinpath(f"cached.{prefix}(hash={query_hash(query)}).json")
    if path.exists():
        logger.debug(f"Cache hit {path.as_posix()}")
        with open(path, 'r') as file:
            return json.load(file)

    result = func()
    os.makedirs(path.parent.as_posix(), exist_ok=True)
    # write then rename, a concurrent reader never sees a partial file
    with tempfile.NamedTemporaryFile('w', dir=path.parent, prefix=f"{path.name}.", suffix=".tmp", delete=False) as file:
        json.dump(result, file)
    os.replace(file.name, path)
    logger.debug(f"Cached {prefix} result at {path.as_posix()}")
    return result
