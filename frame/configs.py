"""Named frame configurations persisted to a JSON file.

Each record is {"name", "params", "timestamp"} where params holds the
FrameSpec fields and timestamp is milliseconds since the epoch.
"""
import json
import logging
import os
import time
from typing import NamedTuple

from shared.types import FrameSpec

logger = logging.getLogger(__name__)


class ConfigError(KeyError):
    """Unknown configuration name, or a save that would overwrite without consent."""


class SavedConfig(NamedTuple):
    name: str
    spec: FrameSpec
    timestamp: int


def _record_to_config(record: dict) -> SavedConfig:
    """Raises KeyError/TypeError/ValueError for a record that is not a saved frame."""
    if not isinstance(record, dict):
        raise TypeError(f"record is {type(record).__name__}, not an object")
    name, params, timestamp = record["name"], record["params"], record["timestamp"]
    if not isinstance(name, str) or not isinstance(params, dict):
        raise TypeError("name must be a string and params an object")
    spec = FrameSpec(**{k: params[k] for k in FrameSpec._fields if k in params})
    return SavedConfig(name, spec, int(timestamp))


class ConfigStore:
    """List, save, load and delete named FrameSpecs in one JSON file."""

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> list[dict]:
        """Well-formed records from the store file; malformed ones are logged and skipped."""
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path) as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configs from '{self.path}': {e}")
            return []
        if not isinstance(records, list):
            logger.error(f"Config file '{self.path}' does not hold a list; ignoring it")
            return []
        kept = []
        for i, r in enumerate(records):
            try:
                _record_to_config(r)
            except (KeyError, TypeError, ValueError) as e:
                logger.error(f"Skipping malformed config record {i} in '{self.path}': {e!r}")
                continue
            kept.append(r)
        return kept

    def _write(self, records: list[dict]) -> None:
        with open(self.path, "w") as f:
            json.dump(records, f, indent=2)
        logger.debug(f"Wrote {len(records)} configs to {self.path}")

    def entries(self) -> list[SavedConfig]:
        """Saved configurations in file order."""
        return [_record_to_config(r) for r in self._read()]

    def names(self) -> list[str]:
        return [c.name for c in self.entries()]

    def save(self, name: str, spec: FrameSpec, overwrite: bool = False) -> SavedConfig:
        """Store *spec* under *name*, replacing an existing entry only if *overwrite*."""
        name = name.strip()
        if not name:
            raise ValueError("Config name must not be empty")
        records = self._read()
        entry = {"name": name, "params": spec._asdict(), "timestamp": int(time.time() * 1000)}
        for i, r in enumerate(records):
            if r["name"] == name:
                if not overwrite:
                    raise ConfigError(f"Config '{name}' already exists")
                records[i] = entry
                break
        else:
            records.append(entry)
        self._write(records)
        logger.info(f"Config '{name}' saved")
        return SavedConfig(name, spec, entry["timestamp"])

    def load(self, name: str) -> FrameSpec:
        for c in self.entries():
            if c.name == name:
                return c.spec
        raise ConfigError(f"No config named '{name}'")

    def delete(self, name: str) -> None:
        records = self._read()
        kept = [r for r in records if r["name"] != name]
        if len(kept) == len(records):
            raise ConfigError(f"No config named '{name}'")
        self._write(kept)
        logger.info(f"Config '{name}' deleted")
