import collections

# slot kinds
VALUE = "value"
METHOD = "method"
OBJECT = "object"

Slot = collections.namedtuple("Slot", "kind, value")
Slot.__doc__ = """
    one entry of an object's dispatch table

    value
        a plain value, copied on clone if it is a builtin container
    method
        a child object built around a routine, owned by the holder
    object
        an object stored as-is
"""

COPIED = (list, dict, set, bytearray)

def is_routine(value):
    # classes are callable but stay plain values
    return callable(value) and not isinstance(value, type)

def copy_value(value):
    if isinstance(value, COPIED):
        return value.copy()
    return value
