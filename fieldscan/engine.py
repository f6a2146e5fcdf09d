"""
Backtracking search that splits an input into one segment per Spec.

Specs are tried left to right. For each spec the candidate lengths are
walked longest first, and the first complete decomposition wins. The
search keeps its own stack of frames, so the number of specs is not
limited by the interpreter's recursion limit. Failed ``(spec index,
offset)`` states are remembered, since whether the remaining specs can
cover the remaining input depends on nothing else.
"""

from typing import Dict, List, Optional, Sequence

from fieldscan import logger
from fieldscan.errors import DoesNotMatch, SearchExhausted
from fieldscan.interval import At, BoundedInterval, OutOfBounds
from fieldscan.spec import Spec


def _on_boundary(data: bytes, pos: int):
    # not inside a multi-byte UTF-8 character
    return pos == len(data) or data[pos] & 0xC0 != 0x80


class Search:
    def __init__(self, specs: Sequence[Spec], data: bytes, max_steps: Optional[int] = None):
        self.specs = list(specs)
        self.data = data
        self.max_steps = max_steps
        self.steps = 0
        self._failed = set()

        # total length bounds of specs[i:]; None means no upper bound
        count = len(self.specs)
        self._rest_min = [0] * (count + 1)
        self._rest_max = [0] * (count + 1)      # type: List[Optional[int]]
        for index in reversed(range(count)):
            length = self.specs[index].length
            self._rest_min[index] = self._rest_min[index + 1] + max(0, length.first or 0)
            if length.last is None or self._rest_max[index + 1] is None:
                self._rest_max[index] = None
            else:
                self._rest_max[index] = self._rest_max[index + 1] + length.last

    def _step(self):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchExhausted(self.steps)

    def candidates(self, index: int, offset: int) -> Optional[BoundedInterval]:
        """Lengths worth trying for ``specs[index]`` at ``offset``, or None if infeasible."""
        spec = self.specs[index]
        remaining = len(self.data) - offset
        try:
            bounded = spec.length.bounded_within(0, remaining)
        except OutOfBounds:
            return None
        if bounded.is_empty():
            return None

        longest = min(bounded.last, remaining - self._rest_min[index + 1])
        shortest = bounded.first
        rest_max = self._rest_max[index + 1]
        if rest_max is not None:
            shortest = max(shortest, remaining - rest_max)
        if longest < shortest:
            return None

        # no candidate may run past the first byte the matcher rejects
        longest = min(longest, spec.matcher.scan(self.data, offset, offset + longest))
        if longest < shortest:
            return None
        return BoundedInterval(At(shortest), At(longest))

    def _feasible(self, spec: Spec, offset: int, length: int):
        """Check a candidate whose bytes ``matcher.scan`` already accepted."""
        stop = offset + length
        if not spec.matcher.complete(self.data, offset, stop):
            return False
        if spec.is_anonymous:
            return True
        return _on_boundary(self.data, offset) and _on_boundary(self.data, stop)

    def run(self) -> Optional[List[int]]:
        """Return the segment lengths of the first decomposition of ``data``."""
        count = len(self.specs)
        size = len(self.data)
        if count == 0:
            return [] if size == 0 else None

        lengths = self.candidates(0, 0)
        if lengths is None:
            self._failed.add((0, 0))
            return None

        # frames are [index, offset, remaining candidate lengths, chosen length]
        stack = [[0, 0, lengths.descending(), None]]
        while stack:
            frame = stack[-1]
            index, offset, pending, _ = frame
            spec = self.specs[index]
            for length in pending:
                self._step()
                if not self._feasible(spec, offset, length):
                    continue

                next_index, next_offset = index + 1, offset + length
                if next_index == count:
                    if next_offset == size:
                        return [entry[3] for entry in stack[:-1]] + [length]
                    continue
                if (next_index, next_offset) in self._failed:
                    continue
                next_lengths = self.candidates(next_index, next_offset)
                if next_lengths is None:
                    self._failed.add((next_index, next_offset))
                    continue

                frame[3] = length
                stack.append([next_index, next_offset, next_lengths.descending(), None])
                break
            else:
                self._failed.add((index, offset))
                stack.pop()

        return None


def assemble(specs: Sequence[Spec], data: bytes, lengths: Sequence[int]) -> Dict[str, str]:
    """Build the field mapping; a later field with the same name wins."""
    result = dict()
    offset = 0
    for spec, length in zip(specs, lengths):
        if not spec.is_anonymous:
            result[spec.field_name.identifier] = data[offset:offset + length].decode('utf8')
        offset += length
    return result


def match_specs(specs: Sequence[Spec], data: bytes, max_steps: Optional[int] = None) -> Dict[str, str]:
    """Match UTF-8 encoded ``data`` against ``specs`` and return the named fields."""
    log = logger.bind(specs=len(specs), size=len(data))
    log.debug('match.begin', max_steps=max_steps)

    search = Search(specs, data, max_steps=max_steps)
    try:
        lengths = search.run()
    except SearchExhausted:
        log.warning('match.exhausted', steps=search.steps)
        raise

    if lengths is None:
        log.debug('match.fail', steps=search.steps)
        raise DoesNotMatch(data)

    log.debug('match.success', steps=search.steps, lengths=lengths)
    return assemble(specs, data, lengths)
