from proto.context import symbols
from proto.context.symbols import Slot, VALUE, METHOD, OBJECT
from proto.context.logging import traced
from proto.context.exceptions import CycleError, InheritWarning, ArgumentNotice
from proto.utils.code import inline_exc, InlineException, type_check
from proto.utils.string import escape
import proto.context
import functools

class ProtoObject:
    """
        an object built from a main routine and a chain of prototypes

        DESIGN:
        symbols
            the dispatch table, name -> Slot
            a routine assigned to a symbol is wrapped in a child object whose parent is the holder,
            so inside its body this() is the method and parent() is the object it was set on
        protos
            inherited objects, most recently linked first
            each is a private clone unless linked as shared
        lookup
            a name belongs to the nearest object defining it: this object, then each proto in order
            reads and calls on a name owned by a proto are delegated to that proto
            writes go to the owner and are also kept locally
        lifecycle
            an object is created inactive and activated by invoking it
            resolution activates it first with no arguments when the context autoloads

        attribute access is sugar over get, set, delete and call
        names of the object's own internals and API shadow symbols of the same name
    """
    def __init__(self, main=None, parent=None, context=None):
        if context is None:
            context = parent.context if parent is not None else proto.context.current()
        if parent is None:
            parent = context.this()
        elif parent.context is not context:
            raise ValueError("parent {} belongs to another context".format(repr(parent)))
        self.__dict__.update(
            context=context,
            main=main,
            symbols={},
            protos=[],
            types=[],
            activated=False,
            parent_id=parent.id if parent is not None else None,
        )
        self.__dict__["id"] = context.register(self)

    @property
    def parent(self):
        return self.context.lookup(self.parent_id)

    @traced
    def __call__(self, *args, **kwargs):
        self.activated = True
        with self.context.activate(self):
            if self.main is None:
                return None
            return self.main(*args, **kwargs)
    def ensure_initialized(self):
        if self.context.autoload and not self.activated:
            try:
                self()
            except Exception:
                # a failed autoload leaves the object inactive, the next resolution retries it
                self.activated = False
                raise

    def owner(self, name):
        self.ensure_initialized()
        if name in self.symbols:
            return self
        for proto in self.protos:
            if proto.has(name):
                return proto
        return self
    def slot(self, name):
        owner = self.owner(name)
        if owner is not self:
            return owner.slot(name)
        return self.symbols.get(name)

    @traced
    def get(self, name, default=None):
        owner = self.owner(name)
        if owner is not self:
            return owner.get(name, default)
        slot = self.symbols.get(name)
        if slot is None:
            return default
        return slot.value
    @traced
    def set(self, name, value):
        owner = self.owner(name)
        if owner is not self:
            owner.set(name, value)
        if isinstance(value, ProtoObject):
            slot = Slot(OBJECT, value)
        elif symbols.is_routine(value):
            slot = Slot(METHOD, ProtoObject(value, parent=self, context=self.context))
        else:
            slot = Slot(VALUE, value)
        self.symbols[name] = slot
    @traced
    def has(self, name):
        if self.owner(name) is not self:
            return True
        return name in self.symbols
    @traced
    def delete(self, name):
        owner = self.owner(name)
        if owner is not self:
            owner.delete(name)
        self.symbols.pop(name, None)
    @traced
    def call(self, name, *args, **kwargs):
        """
            a name nothing defines is not an error, the call does nothing and returns None
            so optional hooks can be called without checking for them
            an autoload that fails still raises, the object was never built
        """
        owner = self.owner(name)
        if owner is not self:
            return owner.call(name, *args, **kwargs)
        slot = self.symbols.get(name)
        if slot is None:
            return None
        if slot.kind in (METHOD, OBJECT) or callable(slot.value):
            return slot.value(*args, **kwargs)
        return None
    def vars(self):
        return {name: slot.value for name, slot in self.symbols.items()}

    @traced
    def proto(self, obj, shared=False):
        type_check(obj, ProtoObject)
        if obj.context is not self.context:
            raise ValueError("can't inherit {} from another context".format(repr(obj)))
        if not shared:
            obj = obj.clone()
        self.check_cycle(obj)
        self.protos.insert(0, obj)
        for type in obj.typeof():
            self.add_type(type)
    @inline_exc(CycleError)
    def check_cycle(self, obj):
        # clones alias the protos of the object they copy, so owned links are checked too
        stack, seen = [obj], set()
        while stack:
            item = stack.pop()
            if item is self:
                raise InlineException("linking {} into {} forms a cycle".format(repr(obj), repr(self)))
            if item.id in seen:
                continue
            seen.add(item.id)
            stack.extend(item.protos)

    def add_type(self, type):
        if not self.has_type(type):
            self.types.append(type)
    def has_type(self, type):
        return type in self.types
    def typeof(self):
        return list(self.types)

    @traced
    def clone(self, memo=None):
        """
            methods and objects held in symbols are cloned and reparented to the clone
            protos are shared with the source object, the list itself is copied
        """
        if memo is None: memo = {}
        if id(self) in memo:
            return memo[id(self)]
        obj = ProtoObject.__new__(ProtoObject)
        memo[id(self)] = obj
        obj.__dict__.update(
            context=self.context,
            main=self.main,
            symbols={},
            protos=list(self.protos),
            types=list(self.types),
            activated=self.activated,
            parent_id=self.parent_id,
        )
        obj.__dict__["id"] = self.context.register(obj)
        for name, slot in self.symbols.items():
            if slot.kind == VALUE:
                obj.symbols[name] = Slot(VALUE, symbols.copy_value(slot.value))
                continue
            child = slot.value.clone(memo)
            if child is not obj:
                child.parent_id = obj.id
            obj.symbols[name] = Slot(slot.kind, child)
        return obj
    def __copy__(self):
        return self.clone()
    def __deepcopy__(self, memo):
        return self.clone(memo)

    def internal(self, name):
        return name.startswith("_") or name in self.__dict__ or hasattr(type(self), name)
    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        slot = self.slot(name)
        if slot is None:
            raise AttributeError("{} has no symbol {}".format(repr(self), escape(name)))
        if slot.kind == METHOD:
            return functools.partial(self.call, name)
        return slot.value
    def __setattr__(self, name, value):
        if name in ("activated", "parent_id"):
            object.__setattr__(self, name, value)
        elif self.internal(name):
            raise AttributeError("can't set attribute {} of {}".format(escape(name), repr(self)))
        else:
            self.set(name, value)
    def __delattr__(self, name):
        if self.internal(name):
            raise AttributeError("can't delete attribute {} of {}".format(escape(name), repr(self)))
        self.delete(name)
    def __contains__(self, name):
        return self.has(name)
    def __repr__(self):
        types = " [{}]".format(", ".join(self.types)) if self.types else ""
        return "<proto #{}{}>".format(self.id, types)

def add_objects(context):
    def new(main=None, parent=None):
        return ProtoObject(main, parent, context=context)
    def proto(main=None, type=None):
        """
            proto(routine, type) creates an object around the routine, tagged with type
            proto(obj) links obj into the object currently being activated
            anything else is reported and ignored
        """
        if isinstance(main, ProtoObject):
            this = context.this()
            if this is None:
                context.report(InheritWarning, "trying to inherit from the global scope")
            else:
                this.proto(main)
            return None
        if symbols.is_routine(main):
            obj = ProtoObject(main, context=context)
            if type is not None:
                obj.add_type(type)
            return obj
        context.report(ArgumentNotice, "invalid argument type passed to proto(): {}".format(repr(main)))
        return None
    def oftype(type, obj):
        if not isinstance(obj, ProtoObject):
            return False
        return obj.has_type(type)
    def typeof(obj):
        return type_check(obj, ProtoObject).typeof()
    def is_proto(value):
        return isinstance(value, ProtoObject)
    def clone(obj):
        return type_check(obj, ProtoObject).clone()
    for name in "new proto oftype typeof is_proto clone".split():
        context.__dict__[name] = locals()[name]
