from proto import utils
from proto.utils.string import flatten
import functools
import sys

delim = ".\t".replace("\t", " " * (4 - 1))

def traced(f):
    """
        marks a ProtoObject operation as visible to the context's tracer
        costs one attribute read when nothing is tracing
    """
    name = "invoke" if f.__name__ == "__call__" else f.__name__
    @functools.wraps(f)
    def wrapped(obj, *args, **kwargs):
        tracer = obj.context.tracer
        if tracer is None:
            return f(obj, *args, **kwargs)
        return tracer.func(obj, name, functools.partial(f, obj), *args, **kwargs)
    return wrapped

def add_logging(context):
    context.tracer = None

    class logging(utils.Context):
        """
            with context.logging():
                car(engine)

            prints every traced operation as obj.name(args), indented by nesting depth
            ~tracer suspends tracing for a block
        """
        def __init__(self, file=None):
            if file is None: file = sys.stderr
            self.file = file
            self.stack_size = 0
            self.outer = None
        def print(self, msg):
            print(delim * self.stack_size + msg, file=self.file)
        def func(self, obj, name, attr, *args, **kwargs):
            args_str = []
            for arg in args:
                args_str.append(self.obj_str(arg))
            for key, arg in kwargs.items():
                args_str.append("{}={}".format(key, self.obj_str(arg)))
            msg = "{}.{}({})".format(self.obj_str(obj), name, ", ".join(args_str))
            self.print(msg)
            try:
                self.stack_size += 1
                return attr(*args, **kwargs)
            finally:
                self.stack_size -= 1
        MAX_OBJ_LEN = 60
        def obj_str(self, obj):
            with ~self:
                s = repr(obj)
            s = flatten(s)
            if len(s) > logging.MAX_OBJ_LEN:
                wrap = "{}<{{}}..>".format(type(obj).__name__)
                s = wrap.format(s[:logging.MAX_OBJ_LEN - len(wrap) + len("{}")])
            return s
        def __enter__(self):
            self.outer = context.tracer
            context.tracer = self
            return self
        def __exit__(self, exc_type, exc, tb):
            context.tracer = self.outer
    context.logging = logging
