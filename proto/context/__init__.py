from proto.context.core import active

class Context:
    def __init__(self, autoload=True):
        """
            one context per logical call tree
            owns the current-object stack, the object arena and the tracer

            autoload
                activate an object with no arguments the first time a symbol is resolved on it
        """
        self.autoload = autoload
        self.tokens = []

        from proto.context.exceptions import add_exceptions
        add_exceptions(self)
        from proto.context.core import add_core
        add_core(self)
        from proto.context.objects import add_objects
        add_objects(self)
        from proto.context.logging import add_logging
        add_logging(self)
    def __enter__(self):
        self.tokens.append(active.set(self))
        return self
    def __exit__(self, exc_type, exc, tb):
        active.reset(self.tokens.pop())
    def __repr__(self):
        return "<Context stack={} objects={}>".format(len(self.stack), len(self.objects))

default = None
def current():
    """the active context, or the process default one"""
    global default
    context = active.get()
    if context is not None:
        return context
    if default is None:
        default = Context()
    return default
