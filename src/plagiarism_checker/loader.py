import json
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .models import TextPair


def load_pairs_jsonl(path: Path) -> List[TextPair]:
    pairs: List[TextPair] = []
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            payload = json.loads(line)
            pair_id = payload.get("pair_id")
            pairs.append(
                TextPair(
                    pair_id=str(pair_id) if pair_id is not None else str(len(pairs)),
                    text1=payload.get("text1") or "",
                    text2=payload.get("text2") or "",
                    metadata={
                        k: v
                        for k, v in payload.items()
                        if k not in {"pair_id", "text1", "text2"}
                    },
                )
            )
    return pairs


def load_pairs_csv(
    path: Path,
    text1_column: str = "text1",
    text2_column: str = "text2",
    id_column: Optional[str] = None,
) -> List[TextPair]:
    frame = pd.read_csv(path)
    missing = [c for c in (text1_column, text2_column) if c not in frame.columns]
    if missing:
        raise KeyError(f"Columns {missing} not found in {path}")

    pairs: List[TextPair] = []
    for position, (_, row) in enumerate(frame.iterrows()):
        pair_id = str(row[id_column]) if id_column else str(position)
        pairs.append(
            TextPair(
                pair_id=pair_id,
                text1=_cell_text(row[text1_column]),
                text2=_cell_text(row[text2_column]),
                metadata={
                    k: v
                    for k, v in row.to_dict().items()
                    if k not in {text1_column, text2_column}
                },
            )
        )
    logging.debug("Loaded %d text pairs from %s", len(pairs), path)
    return pairs


def _cell_text(value) -> str:
    return "" if pd.isna(value) else str(value)
