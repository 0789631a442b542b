"""Filesystem sink for rendered artifacts.

A publish writes its artifacts as one set: every file is first staged to a
hidden temp file (concurrently), and only when all of them succeeded are the
temp files renamed into place. A failed staging leaves no artifact behind.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from praia_news.errors import ArtifactWriteError

logger = logging.getLogger(__name__)


class ArtifactSink:
    """Write named text artifacts into a single output directory."""

    def __init__(self, directory: Path, *, max_workers: int = 4) -> None:
        self._directory = Path(directory)
        self._max_workers = max_workers

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        """Resolve ``name`` inside the output directory, rejecting anything that is not a bare filename."""
        if not name or Path(name).name != name or name in (".", ".."):
            raise ValueError(f"Artifact name must be a plain filename, got {name!r}")
        return self._directory / name

    def write_all(self, artifacts: Mapping[str, str]) -> dict[str, Path]:
        """Write every artifact in ``artifacts`` (filename -> text), or none of them.

        Raises :class:`ArtifactWriteError` if any file cannot be staged; staged
        files are cleaned up first. If renaming fails part-way, the error
        message lists which files were already published.
        """
        targets = {name: self.path_for(name) for name in artifacts}
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArtifactWriteError(f"Cannot create output directory {self._directory}: {exc}") from exc

        staged: dict[str, Path] = {}
        failures: dict[str, OSError] = {}
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {executor.submit(self._stage, name, text): name for name, text in artifacts.items()}
            for future in as_completed(futures):
                name = futures[future]
                try:
                    staged[name] = future.result()
                except OSError as exc:
                    logger.error("Failed to stage artifact %s: %s", name, exc)
                    failures[name] = exc

        if failures:
            self._discard(staged.values())
            names = ", ".join(sorted(failures))
            raise ArtifactWriteError(f"Failed to write artifacts: {names}") from next(iter(failures.values()))

        written: dict[str, Path] = {}
        for name in artifacts:
            try:
                staged[name].replace(targets[name])
            except OSError as exc:
                self._discard(path for key, path in staged.items() if key not in written)
                done = ", ".join(written) or "none"
                raise ArtifactWriteError(f"Failed to publish {name}; already published: {done}") from exc
            written[name] = targets[name]
            logger.info("Wrote %s", targets[name])
        return written

    def write(self, name: str, text: str) -> Path:
        """Write a single artifact."""
        return self.write_all({name: text})[name]

    def remove(self, name: str) -> bool:
        """Delete an artifact if present. Returns whether a file was removed."""
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Removed %s", path)
        return True

    def _stage(self, name: str, text: str) -> Path:
        tmp = self._directory / f".{name}.{uuid.uuid4().hex}.tmp"
        try:
            tmp.write_text(text, encoding="utf-8")
        except OSError:
            self._discard([tmp])
            raise
        return tmp

    @staticmethod
    def _discard(paths: Iterable[Path]) -> None:
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove staged file %s", path)
