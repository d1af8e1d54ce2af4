"""Schema: a keyed collection of pipes

``validate`` walks the pipes in registration order and stops at the first
failure. ``validate_all`` submits one task per pipe to a thread pool and
collects every failure; entries arrive in completion order, so callers
should compare them as a set or go through ``keys()``/``by_key()``.

Usage:
    schema = Schema.from_map({
        "email": StringPipe(email, strings.is_email()),
        "age": IntPipe(age, ints.min_value(18)),
    })
    if (errors := schema.validate_all()) is not None:
        return errors.to_list()
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterator, Mapping

from valpipe.core.config import get_settings
from valpipe.core.logging import schema_logger
from .errors import ValidationError, ValidationErrorList
from .pipe import Pipe

log = schema_logger()


class Schema:
    """Ordered pipes with sequential and concurrent validation."""

    __slots__ = ("_pipes", "_max_workers")

    def __init__(self, *pipes: Pipe[Any], max_workers: int | None = None):
        self._pipes: list[Pipe[Any]] = []
        self._max_workers = max_workers
        slots: dict[str, int] = {}
        for pipe in pipes:
            # last registration of a key wins, in the slot of the first
            if pipe.key and pipe.key in slots:
                self._pipes[slots[pipe.key]] = pipe
                continue
            if pipe.key:
                slots[pipe.key] = len(self._pipes)
            self._pipes.append(pipe)

    @classmethod
    def from_map(cls, pipes: Mapping[str, Pipe[Any]], *, max_workers: int | None = None) -> Schema:
        """Key each pipe by its mapping key, in mapping iteration order.

        The mapping key replaces any key the pipe already carries, including
        one set by ``Entry``.
        """
        for key, pipe in pipes.items():
            pipe._set_key(key)
        return cls(*pipes.values(), max_workers=max_workers)

    @property
    def pipes(self) -> tuple[Pipe[Any], ...]:
        return tuple(self._pipes)

    def keys(self) -> list[str]:
        return [p.key for p in self._pipes]

    def __len__(self) -> int:
        return len(self._pipes)

    def __iter__(self) -> Iterator[Pipe[Any]]:
        return iter(self._pipes)

    def validate(self) -> ValidationError | None:
        """First failure in registration order, or None."""
        for pipe in self._pipes:
            if (error := pipe.validate()) is not None:
                log.debug("schema_validated", pipes=len(self._pipes), failed_key=error.key)
                return error
        log.debug("schema_validated", pipes=len(self._pipes), failed_key=None)
        return None

    def validate_all(self) -> ValidationErrorList | None:
        """Every failure across all pipes, or None when all pass.

        Each pipe is validated on its own worker. The pool is joined before
        returning, and an exception escaping a pipe propagates to the caller.
        """
        if not self._pipes:
            return None

        errors: list[ValidationError] = []
        lock = threading.Lock()

        def run(pipe: Pipe[Any]) -> None:
            if (error := pipe.validate()) is not None:
                with lock:
                    errors.append(error)

        with ThreadPoolExecutor(max_workers=self._workers(), thread_name_prefix="valpipe-schema") as executor:
            futures = [executor.submit(run, pipe) for pipe in self._pipes]
        for future in futures:
            future.result()

        log.debug("schema_validated_all", pipes=len(self._pipes), failures=len(errors))
        if not errors:
            return None
        return ValidationErrorList(errors)

    def _workers(self) -> int:
        workers = self._max_workers or get_settings().MAX_WORKERS or len(self._pipes)
        return max(1, workers)

    def __repr__(self) -> str:
        return f"Schema(keys={self.keys()!r})"
