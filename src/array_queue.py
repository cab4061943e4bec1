"""Queue backed by a growable circular buffer.

Logical element i lives at slot (head + i) % capacity. When the buffer is
full the next enqueue doubles it and unwraps the window so the front moves
to slot 0. Capacity never shrinks; clear() starts over from a fresh buffer.
"""

from abstract_queue import AbstractQueue

_INITIAL_CAPACITY = 1


class ArrayQueue(AbstractQueue):
    def __init__(self):
        super().__init__()
        self._data = [None] * _INITIAL_CAPACITY
        self._head = 0

    def capacity(self):
        return len(self._data)

    def _enqueue_impl(self, value):
        if self._size == len(self._data):
            self._grow()
        self._data[(self._head + self._size) % len(self._data)] = value

    def _element_impl(self):
        return self._data[self._head]

    def _dequeue_impl(self):
        self._data[self._head] = None
        self._head = (self._head + 1) % len(self._data)

    def _clear_impl(self):
        self._data = [None] * _INITIAL_CAPACITY
        self._head = 0

    def _grow(self):
        capacity = len(self._data)
        new_data = [None] * (capacity * 2)
        for i in range(self._size):
            new_data[i] = self._data[(self._head + i) % capacity]
        self._data = new_data
        self._head = 0

    def copy(self):
        clone = ArrayQueue()
        for value in self:
            clone.enqueue(value)
        return clone

    def __iter__(self):
        capacity = len(self._data)
        for i in range(self._size):
            yield self._data[(self._head + i) % capacity]
