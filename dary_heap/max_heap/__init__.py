from dary_heap.max_heap.errors import EmptyHeapError, InvalidConfigurationError
from dary_heap.max_heap.max_heap import DaryMaxHeap
from dary_heap.max_heap.topk import get_topk
