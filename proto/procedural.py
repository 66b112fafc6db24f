"""
    the procedural interface

    every helper works against the active context, see proto.context.current
"""
from proto.context import current

def proto(main=None, type=None):
    return current().proto(main, type)
def this():
    return current().this()
def parent():
    return current().parent()
def oftype(type, obj):
    return current().oftype(type, obj)
def typeof(obj):
    return current().typeof(obj)
def is_proto(value):
    return current().is_proto(value)
def clone(obj):
    return current().clone(obj)
