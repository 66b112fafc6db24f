import functools

class InlineException(Exception): pass
def inline_exc(exc_type):
    def wrap(f):
        @functools.wraps(f)
        def wrapped(*args, inline_exc=False, **kwargs):
            if not inline_exc:
                try:
                    return f(*args, **kwargs)
                except InlineException as exc:
                    raise exc_type(*exc.args).with_traceback(exc.__traceback__) from None
                # REASON:
                # - with_traceback makes it point to the source instead of here
                # - from None hides the reraise
            else:
                return f(*args, **kwargs)
        return wrapped
    return wrap

def type_check(obj, type):
    if not isinstance(obj, type):
        raise TypeError("{} is not {}".format(repr(obj), type.__name__))
    return obj
