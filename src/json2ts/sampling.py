"""
Streaming samples out of large JSON files.
"""

from itertools import islice
from pathlib import Path
from typing import Any, List, Optional

import ijson
from tqdm import tqdm

from .errors import SampleReadError


def read_sample(path: str | Path, limit: Optional[int] = None, progress: bool = False) -> List[Any]:
    """
    Reads the first ``limit`` elements of a top-level JSON array.

    Uses ijson so only the sampled elements are ever held in memory.
    ``limit`` of None reads every element.
    """
    path = Path(path)
    if limit is not None and limit < 0:
        raise ValueError(f"Sample limit must be non-negative, got {limit}")

    items: List[Any] = []
    with open(path, "rb") as f:
        # use_float=True keeps numbers as float instead of Decimal
        stream = islice(ijson.items(f, "item", use_float=True), limit)
        with tqdm(desc=f"Sampling {path.name}", unit=" items", total=limit, disable=not progress) as pbar:
            try:
                for item in stream:
                    items.append(item)
                    pbar.update(1)
            except ijson.JSONError as e:
                raise SampleReadError(f"Invalid JSON in {path} after {len(items)} items: {e}") from e
    return items
