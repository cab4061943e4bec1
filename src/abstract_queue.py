"""FIFO queue contract with a shared bulk-operation engine.

Concrete backings supply four primitives (_enqueue_impl, _element_impl,
_dequeue_impl, _clear_impl). Size bookkeeping, precondition checks and the
predicate-driven bulk operations live here and only ever go through those
primitives, so they work unchanged for any backing.
"""

from abc import ABC, abstractmethod


class AbstractQueue(ABC):
    def __init__(self):
        self._size = 0

    def enqueue(self, value):
        if value is None:
            raise ValueError("cannot enqueue None")
        self._enqueue_impl(value)
        self._size += 1

    def element(self):
        if self._size == 0:
            raise IndexError("element from empty queue")
        return self._element_impl()

    def dequeue(self):
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        value = self._element_impl()
        self._dequeue_impl()
        self._size -= 1
        return value

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def clear(self):
        self._clear_impl()
        self._size = 0

    def remove_if(self, predicate):
        """Remove every element matching predicate, keeping survivor order."""
        _check_predicate(predicate)
        self.retain_if(lambda value: not predicate(value))

    def retain_if(self, predicate):
        """Keep only elements matching predicate, in their original order."""
        _check_predicate(predicate)
        iterations = self._size
        for _ in range(iterations):
            value = self.element()
            keep = predicate(value)
            self.dequeue()
            if keep:
                self.enqueue(value)

    def take_while(self, predicate):
        """Keep the longest front prefix whose elements all match predicate."""
        _check_predicate(predicate)
        self._scan_prefix(predicate, lambda: self.enqueue(self.dequeue()), 1)

    def drop_while(self, predicate):
        """Discard the longest front prefix whose elements all match predicate."""
        _check_predicate(predicate)
        self._scan_prefix(predicate, self.dequeue, 0)

    def _scan_prefix(self, predicate, keep, flush_multiplier):
        # Peek at the front while predicate holds; on the first failure at
        # offset i the remaining iterations - i elements sit at the front.
        iterations = self._size
        for i in range(iterations):
            if predicate(self.element()):
                keep()
            else:
                for _ in range((iterations - i) * flush_multiplier):
                    self.dequeue()
                return

    @abstractmethod
    def copy(self):
        """Return an independent shallow copy of the queue."""
        pass

    @abstractmethod
    def __iter__(self):
        """Yield elements front to back without removing them."""
        pass

    @abstractmethod
    def _enqueue_impl(self, value):
        pass

    @abstractmethod
    def _element_impl(self):
        pass

    @abstractmethod
    def _dequeue_impl(self):
        pass

    @abstractmethod
    def _clear_impl(self):
        pass

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0


def _check_predicate(predicate):
    if not callable(predicate):
        raise TypeError("predicate must be callable")
