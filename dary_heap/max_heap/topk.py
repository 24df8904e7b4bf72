from typing import Any

from dary_heap.max_heap.max_heap import DaryMaxHeap


def get_topk(heap: DaryMaxHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a max heap.

    The heap is left untouched: the K largest values are taken from a copy
    of its level-order layout.

    Parameters
    ----------
    heap : DaryMaxHeap
        A DaryMaxHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, largest first.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    values = heap.to_list()
    values.sort(reverse=True)
    return values[:k]
