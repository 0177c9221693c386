import copy

import pytest

from currc.queues import Queue


@pytest.fixture
def filled():
    queue = Queue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    return queue


def test_contents_front_first(filled):
    assert list(filled) == [1, 2, 3]
    assert len(filled) == 3


def test_dequeue_returns_front(filled):
    assert filled.dequeue() == 1
    assert list(filled) == [2, 3]


def test_peek_does_not_remove(filled):
    assert filled.peek() == 1
    assert len(filled) == 3


def test_dequeue_from_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_peek_at_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_enqueue_and_dequeue_none():
    queue = Queue()
    queue.enqueue(None)
    assert queue.dequeue() is None
    assert queue.is_empty() is True


def test_is_empty(filled):
    assert filled.is_empty() is False
    for _ in range(3):
        filled.dequeue()
    assert filled.is_empty() is True


def test_clone_copies_items():
    queue = Queue()
    queue.enqueue([1])
    queue.enqueue([2])
    copied = queue.clone(copy.copy)
    queue.peek().append(99)
    assert list(copied) == [[1], [2]]
    assert list(queue) == [[1, 99], [2]]


def test_clone_without_copy_func_shares_items():
    queue = Queue()
    item = [1]
    queue.enqueue(item)
    copied = queue.clone()
    assert copied.peek() is item


def test_clone_is_independent(filled):
    copied = filled.clone(lambda value: value * 10)
    filled.dequeue()
    assert list(copied) == [10, 20, 30]
    assert list(filled) == [2, 3]