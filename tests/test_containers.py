import random

import pytest

from algobox.containers import IntQueue, IntStack, RandomizedSet


def test_queue_is_fifo():
    queue = IntQueue()
    for value in [1, 2, 3]:
        queue.push(value)
    assert queue.peek() == 1
    assert [queue.pop() for _ in range(3)] == [1, 2, 3]
    assert queue.empty() is True


def test_queue_reports_contents():
    queue = IntQueue()
    queue.push(1)
    queue.push(2)
    assert list(queue) == [1, 2]
    assert len(queue) == 2
    assert queue.empty() is False


def test_queue_handles_negative_one():
    queue = IntQueue()
    queue.push(-1)
    assert queue.pop() == -1
    assert queue.empty() is True


@pytest.mark.parametrize("method", ["pop", "peek"])
def test_queue_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(IntQueue(), method)()


def test_stack_is_lifo():
    stack = IntStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert stack.top() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.empty() is True


def test_stack_pop_shrinks():
    stack = IntStack()
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    assert list(stack) == [1]
    assert stack.empty() is False


@pytest.mark.parametrize("method", ["pop", "top"])
def test_stack_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(IntStack(), method)()


def test_randomized_set_insert_and_remove():
    rs = RandomizedSet(random.Random(0))
    assert rs.insert(0) is True
    assert rs.insert(1) is True
    assert rs.insert(1) is False
    assert rs.remove(0) is True
    assert rs.remove(0) is False
    assert rs.insert(2) is True
    assert rs.remove(1) is True
    assert sorted(rs) == [2]
    assert rs.get_random() == 2


def test_randomized_set_membership_after_many_operations():
    rs = RandomizedSet(random.Random(1))
    expected = set()
    for value in range(20):
        rs.insert(value)
        expected.add(value)
    for value in range(0, 20, 3):
        rs.remove(value)
        expected.discard(value)
    assert set(rs) == expected
    assert len(rs) == len(expected)
    assert all(value in rs for value in expected)


def test_randomized_set_random_draws_are_members():
    rs = RandomizedSet(random.Random(42))
    for value in [10, 20, 30]:
        rs.insert(value)
    draws = {rs.get_random() for _ in range(200)}
    assert draws == {10, 20, 30}


def test_randomized_set_empty_raises():
    with pytest.raises(IndexError):
        RandomizedSet().get_random()