"""JSON-lines store of published prosecutions, keyed by identifier."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Set

from food_offences.models.prosecution import Prosecution

logger = logging.getLogger(__name__)


class ProsecutionStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Iterator[Prosecution]:
        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                yield Prosecution(**json.loads(line))

    def existing_ids(self) -> Set[str]:
        return {prosecution.id for prosecution in self.load()}

    def filter_new(self, prosecutions: Iterable[Prosecution]) -> List[Prosecution]:
        seen = self.existing_ids()
        return [prosecution for prosecution in prosecutions if prosecution.id not in seen]

    def upsert(self, prosecutions: Iterable[Prosecution]) -> int:
        """Merge ``prosecutions`` into the store by id and rewrite it. Returns rows written.

        Rows go to a sibling temporary file that replaces the store only once
        fully written, so a failed write leaves the previous store intact.
        """
        rows: Dict[str, Prosecution] = {p.id: p for p in self.load()}
        for prosecution in prosecutions:
            rows[prosecution.id] = prosecution

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        count = 0
        try:
            with tmp_path.open("w", encoding="utf-8") as handle:
                for count, prosecution in enumerate(rows.values(), start=1):
                    handle.write(json.dumps(prosecution.model_dump(mode="json")) + "\n")
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.info("Wrote %s prosecution rows to %s", count, self.path)
        return count
