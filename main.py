from dary_heap import DaryMaxHeap


heap = DaryMaxHeap(branching_factor=4)
for value in [10, 12, 11, 120, 175, 140, 123]:
    heap.insert(value)

while not heap.is_empty():
    print(heap.extract_max())
