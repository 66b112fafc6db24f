from .context import Context, current
from .context.objects import ProtoObject
from .context.exceptions import ProtoError, CycleError, ProtoWarning, InheritWarning, ArgumentNotice
from .procedural import proto, this, parent, oftype, typeof, is_proto, clone

__version__ = "1.0"
