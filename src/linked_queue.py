from abstract_queue import AbstractQueue


class LinkedQueue(AbstractQueue):
    class Node:
        def __init__(self, value):
            self.value = value
            self.next = None

    def __init__(self):
        super().__init__()
        self._head = None
        self._tail = None

    def _enqueue_impl(self, value):
        node = self.Node(value)
        if self._head is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def _element_impl(self):
        return self._head.value

    def _dequeue_impl(self):
        self._head = self._head.next
        # Keep head and tail both None once the chain is empty.
        if self._head is None:
            self._tail = None

    def _clear_impl(self):
        self._head = None
        self._tail = None

    def copy(self):
        clone = LinkedQueue()
        current = self._head
        while current is not None:
            clone.enqueue(current.value)
            current = current.next
        return clone

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.value
            current = current.next
