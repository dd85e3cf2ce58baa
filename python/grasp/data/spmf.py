"""SPMF sequence database parsing and pattern file writing."""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Iterator

import numpy as np
from numpy.typing import NDArray
import structlog

from grasp.core.errors import InputUnreadableError, OutputUnwritableError
from grasp.core.types import RepresentativePattern
from grasp.mining.sinks import PatternSink

logger = structlog.get_logger()

ITEMSET_END = -1
SEQUENCE_END = -2

_METADATA_PREFIXES = ("#", "%", "@")
_ANNOTATION = re.compile(r"#(SUP|COVER):\s*(\d+)")


class SPMFParser:
    """Read SPMF-formatted sequence databases and pattern files."""

    def parse_sequences(self, path: Path) -> list[NDArray[np.int64]]:
        """Parse a sequence database, one sequence per line.

        Itemset separators (-1) are dropped and -2 ends the sequence, so
        each sequence becomes a flat array of item ids.
        """
        sequences: list[NDArray[np.int64]] = []
        for lineno, line in self._lines(path):
            items: list[int] = []
            for token in line.split():
                try:
                    value = int(token)
                except ValueError:
                    raise InputUnreadableError(path, f"line {lineno}: bad token {token!r}") from None
                if value == SEQUENCE_END:
                    break
                if value == ITEMSET_END:
                    continue
                if value < 0:
                    raise InputUnreadableError(path, f"line {lineno}: negative item {value}")
                items.append(value)
            sequences.append(np.asarray(items, dtype=np.int64))

        logger.info("sequences_parsed", path=str(path), sequences=len(sequences))
        return sequences

    def parse_patterns(self, path: Path) -> list[RepresentativePattern]:
        """Parse a pattern file written by :class:`SPMFPatternWriter`."""
        patterns: list[RepresentativePattern] = []
        for lineno, line in self._lines(path):
            body, _, _ = line.partition("#")
            annotations = dict(_ANNOTATION.findall(line))
            if "SUP" not in annotations:
                raise InputUnreadableError(path, f"line {lineno}: missing #SUP:")
            try:
                items = tuple(int(t) for t in body.split() if int(t) != ITEMSET_END)
            except ValueError:
                raise InputUnreadableError(path, f"line {lineno}: bad pattern {body!r}") from None
            support = int(annotations["SUP"])
            patterns.append(RepresentativePattern(
                items=items,
                cover=int(annotations.get("COVER", support)),
                support=support,
            ))
        return patterns

    def _lines(self, path: Path) -> Iterator[tuple[int, str]]:
        try:
            with open(path, encoding="utf-8") as f:
                for lineno, raw in enumerate(f, start=1):
                    line = raw.strip()
                    if not line or line.startswith(_METADATA_PREFIXES):
                        continue
                    yield lineno, line
        except OSError as e:
            raise InputUnreadableError(path, e.strerror or str(e)) from e


class SPMFPatternWriter(PatternSink):
    """Write each pattern to an SPMF pattern file as soon as it arrives.

    The file is line buffered, so everything accepted before a failure is
    already on disk.
    """

    def __init__(self, path: Path, include_cover: bool = False) -> None:
        self.path = Path(path)
        self.include_cover = include_cover
        self.written = 0
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file: IO[str] | None = open(self.path, "w", encoding="utf-8", buffering=1)
        except OSError as e:
            raise OutputUnwritableError(self.path, e.strerror or str(e)) from e

    def accept(self, pattern: RepresentativePattern) -> None:
        if self._file is None:
            raise OutputUnwritableError(self.path, "writer already finished")
        try:
            self._file.write(pattern.to_spmf(self.include_cover) + "\n")
        except OSError as e:
            raise OutputUnwritableError(self.path, e.strerror or str(e)) from e
        self.written += 1

    def finish(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None
        logger.info("patterns_written", path=str(self.path), patterns=self.written)

    def __enter__(self) -> SPMFPatternWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish()
