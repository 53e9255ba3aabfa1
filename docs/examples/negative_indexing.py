from array import array

import rangeview
from rangeview import R


# windows with negative bounds
a = [0, 1, 2, 3, 4, 5]
assert list(rangeview.view(a, R[:-2])) == [0, 1, 2, 3]
assert list(rangeview.view(a, R[-4:-1])) == [2, 3, 4]

# reversal and steps are applied afterwards
assert list(reversed(rangeview.view(a, R[:-2]))) == [3, 2, 1, 0]
assert list(rangeview.view(a, R[:-2])[::-2]) == [3, 1]

# writable windows
a = [0, 1, 2, 3, 4, 5]
with rangeview.view_mut(a, R[1:-2]) as w:
    w[0] = 10
assert a == [0, 10, 2, 3, 4, 5]

# single items with negative indices
a = [0, 1, 2, 3, 4, 5]
assert rangeview.at(a, -1) == 5
assert rangeview.at(a, -2) == 4
rangeview.put(a, -1, 50)
assert a == [0, 1, 2, 3, 4, 50]

# errors instead of clamping
try:
    rangeview.view(a, R[-10:])
except rangeview.IndexUnderflow as e:
    print("rejected:", e)

# buffers
b = array('i', [0, 1, 2, 3, 4, 5])
span = rangeview.view_buffer_mut(b, R[1:-2])
span[0] = 10
assert b.tolist() == [0, 10, 2, 3, 4, 5]
span.release()
