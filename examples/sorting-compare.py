import random
import sys
import time

import pyarrow as pa

from blockframe import Frame

try:
    rows = int(sys.argv[1])
except (IndexError, ValueError):
    rows = 100_000

table = pa.table({
    "year": [random.randint(1900, 2024) for _ in range(rows)],
    "value": [random.random() for _ in range(rows)],
})
frame = Frame.from_arrow(table)

start = time.time()
sorted_frame = frame.sort_by("-year", "value")
blockframe_time = time.time() - start

start = time.time()
sorted_table = table.sort_by([("year", "descending"), ("value", "ascending")])
pyarrow_time = time.time() - start

assert sorted_frame.to_arrow().equals(sorted_table)
print("ROWS:", rows, "BLOCKFRAME:", round(blockframe_time, 2), "PYARROW:", round(pyarrow_time, 2))
