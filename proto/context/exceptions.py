from proto import utils
import sys
import warnings

class ProtoError(Exception):
    pass
class CycleError(ProtoError):
    "linking would make a prototype chain reach back to the linking object"

class ProtoWarning(UserWarning):
    pass
class InheritWarning(ProtoWarning):
    "proto() asked to inherit while no object is being activated"
class ArgumentNotice(ProtoWarning):
    "proto() got neither a routine nor a prototype object"

def add_exceptions(context):
    context.exc = utils.Object()
    for exception in [ProtoError, CycleError, ProtoWarning, InheritWarning, ArgumentNotice]:
        context.exc[exception.__name__] = exception

    def report(category, msg):
        """
            soft failures are warnings, the caller keeps running
            the warning points at the first frame outside the package
        """
        frame, level = sys._getframe(1), 1
        while frame is not None and frame.f_globals.get("__name__", "").split(".")[0] == "proto":
            frame, level = frame.f_back, level + 1
        warnings.warn(msg, category, stacklevel=level + 1)
    context.report = report
