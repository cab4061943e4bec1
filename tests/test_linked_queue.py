import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_queue import LinkedQueue


class TestLinkedQueue(unittest.TestCase):
    def test_new_queue_has_no_nodes(self):
        q = LinkedQueue()
        self.assertIsNone(q._head)
        self.assertIsNone(q._tail)

    def test_single_node_is_head_and_tail(self):
        q = LinkedQueue()
        q.enqueue(1)
        self.assertIs(q._head, q._tail)
        self.assertEqual(q._head.value, 1)

    def test_chain_links_front_to_back(self):
        q = LinkedQueue()
        for i in range(3):
            q.enqueue(i)
        self.assertEqual(q._head.value, 0)
        self.assertIs(q._head.next.next, q._tail)
        self.assertIsNone(q._tail.next)

    def test_dequeue_to_empty_drops_tail(self):
        q = LinkedQueue()
        q.enqueue(1)
        q.enqueue(2)
        q.dequeue()
        q.dequeue()
        self.assertIsNone(q._head)
        self.assertIsNone(q._tail)

    def test_enqueue_after_draining(self):
        q = LinkedQueue()
        q.enqueue(1)
        q.dequeue()
        q.enqueue(2)
        q.enqueue(3)
        self.assertEqual(q._head.value, 2)
        self.assertEqual(q._tail.value, 3)
        self.assertEqual(list(q), [2, 3])

    def test_clear_drops_chain(self):
        q = LinkedQueue()
        for i in range(5):
            q.enqueue(i)
        q.clear()
        self.assertIsNone(q._head)
        self.assertIsNone(q._tail)
        self.assertEqual(q.size(), 0)

    def test_copy_builds_new_nodes(self):
        q = LinkedQueue()
        q.enqueue("a")
        q.enqueue("b")
        clone = q.copy()
        self.assertIsNot(clone._head, q._head)
        self.assertIs(clone._head.value, q._head.value)
        clone.dequeue()
        self.assertEqual(list(q), ["a", "b"])
        self.assertEqual(list(clone), ["b"])


if __name__ == "__main__":
    unittest.main()
