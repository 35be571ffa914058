"""Singly linked lists of integers and the classic operations on them.

An empty list is ``None``. Functions that rearrange a list do so in place
and return the (possibly new) head.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None


LinkedList = Optional[ListNode]


def _walk(head: LinkedList) -> Iterator[ListNode]:
    """Yield the nodes of a list in order, refusing to loop forever on a cycle."""
    seen: set[ListNode] = set()
    node = head
    while node is not None:
        if node in seen:
            raise ValueError("list contains a cycle")
        seen.add(node)
        yield node
        node = node.next


def from_iterable(values: Iterable[int]) -> LinkedList:
    """Build a list holding ``values`` in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: LinkedList) -> list[int]:
    """Return the values of a list; raise ``ValueError`` if it has a cycle."""
    return [node.val for node in _walk(head)]


def has_cycle(head: LinkedList) -> bool:
    """Return whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: LinkedList) -> LinkedList:
    """Return the node where a cycle begins, or ``None`` if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def sort_list(head: LinkedList) -> LinkedList:
    """Sort a list's values in ascending order, keeping its nodes in place."""
    nodes = list(_walk(head))
    for node, value in zip(nodes, sorted(node.val for node in nodes)):
        node.val = value
    return head


def add_two_numbers(l1: LinkedList, l2: LinkedList) -> LinkedList:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def reverse_list(head: LinkedList) -> LinkedList:
    """Reverse a list in place and return its new head."""
    previous: LinkedList = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def delete_middle(head: LinkedList) -> LinkedList:
    """Unlink the node at index ``len // 2`` and return the head."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head


def is_palindrome(head: LinkedList) -> bool:
    """Return whether a list reads the same both ways; the list is left intact."""
    if head is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    result = True
    back, front = second, head
    while back is not None:
        if back.val != front.val:
            result = False
            break
        back = back.next
        front = front.next
    slow.next = reverse_list(second)
    return result


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head.

    The node cannot be the tail.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node this way")
    node.val = following.val
    node.next = following.next


def odd_even_list(head: LinkedList) -> LinkedList:
    """Regroup nodes so that those at odd positions precede those at even ones."""
    if head is None or head.next is None or head.next.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: LinkedList) -> LinkedList:
    """Return the middle node; of two middles, the second one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse_between(head: LinkedList, left: int, right: int) -> LinkedList:
    """Reverse the values at one-based positions ``left`` to ``right`` inclusive."""
    if left < 1:
        raise ValueError("positions start at 1")
    if right < left:
        return head
    nodes = list(islice(_walk(head), right))
    if len(nodes) < right:
        raise IndexError(f"list has fewer than {right} nodes")
    segment = nodes[left - 1 : right]
    for node, value in zip(segment, [node.val for node in reversed(segment)]):
        node.val = value
    return head