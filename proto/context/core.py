from proto import utils
import contextvars
import itertools
import weakref

active = contextvars.ContextVar("proto.context", default=None)

def add_core(context):
    """
        DESIGN:
        stack
            the current-object stack, one per context
            an activation pushes before running its body and pops after, even if the body raises
        arena
            objects are registered under stable ids
            back references (parents) are stored as ids and resolved weakly,
            so a child never keeps its holder alive
        active context
            the procedural helpers work against whichever context is active
            a context becomes active for the duration of any of its activations
    """
    context.stack = []
    context.objects = weakref.WeakValueDictionary()
    ids = itertools.count(1)

    def register(obj):
        id = next(ids)
        context.objects[id] = obj
        return id
    def lookup(id):
        if id is None:
            return None
        return context.objects.get(id)
    def this():
        return context.stack[-1] if context.stack else None
    def parent():
        obj = this()
        if obj is None:
            return None
        return obj.parent
    for name in "register lookup this parent".split():
        context.__dict__[name] = locals()[name]

    class Frame(utils.Context):
        def __init__(self, obj):
            self.obj = obj
        def __enter__(self):
            context.stack.append(self.obj)
            self.token = active.set(context)
            return self.obj
        def __exit__(self, exc_type, exc, tb):
            active.reset(self.token)
            context.stack.pop()
    context.activate = Frame
