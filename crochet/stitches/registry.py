"""
Stitch registry: loads the stitch-count table from YAML at startup, validates
it against StitchKind, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to the
registry after startup.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .types import StitchEntry, StitchKind

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class StitchRegistry:
    """
    Immutable registry of per-stitch consumed/produced counts.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.stitches: dict[StitchKind, StitchEntry] = {}

        self._load_stitches()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            return yaml.safe_load(f)

    def _load_stitches(self) -> None:
        data = self._load_yaml("stitches.yaml")
        errors: list[str] = []

        for entry in data.get("stitches") or []:
            raw_id = entry.get("id")
            try:
                kind = StitchKind(raw_id)
            except ValueError:
                errors.append(f"unknown stitch id: {raw_id!r}")
                continue

            if kind in self.stitches:
                errors.append(f"duplicate entry for stitch {kind.value!r}")
                continue

            consumes = entry.get("consumes")
            produces = entry.get("produces")
            for field_name, value in (("consumes", consumes), ("produces", produces)):
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(
                        f"stitch {kind.value!r} has invalid {field_name}: {value!r}"
                    )

            self.stitches[kind] = StitchEntry(
                id=kind,
                description=str(entry.get("description", "")).strip(),
                consumes=consumes,
                produces=produces,
                notes=str(entry.get("notes", "")).strip(),
            )

        for kind in StitchKind:
            if kind not in self.stitches:
                errors.append(f"stitch {kind.value!r} has no entry in stitches.yaml")

        if errors:
            raise ValueError(
                "Stitch registry validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

        logger.debug("loaded %d stitch entries from %s", len(self.stitches), self._data_dir)

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, kind: StitchKind) -> StitchEntry:
        return self.stitches[kind]

    def consumes(self, kind: StitchKind) -> int:
        """Stitches of the previous round a single ``kind`` stitch works into."""
        return self.stitches[kind].consumes

    def produces(self, kind: StitchKind) -> int:
        """Stitches a single ``kind`` stitch leaves for the next round."""
        return self.stitches[kind].produces


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time; read-only after construction.

_registry: StitchRegistry = StitchRegistry()


def get_registry() -> StitchRegistry:
    """Return the module-level registry singleton."""
    return _registry
