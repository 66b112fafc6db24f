from .testdefs import *
from proto import proto, this, parent, oftype, typeof, is_proto, clone, current
from proto import ProtoObject, InheritWarning, ArgumentNotice, ProtoWarning
import warnings

def creates():
    obj = proto(lambda: None, "thing")
    return is_proto(obj), obj.typeof(), obj.activated
def creates_untyped():
    return typeof(proto(lambda: None))
def inherits():
    base = proto(lambda: None, "base")
    def main():
        proto(base)
        return this()
    return typeof(proto(main, "derived")())
def inherit_global():
    return proto(ProtoObject())
def invalid():
    return proto(42)
def invalid_none():
    return proto()
def oftype_checks():
    obj = proto(lambda: None, "thing")
    return oftype("thing", obj), oftype("other", obj), oftype("thing", "thing")
def is_proto_checks():
    return is_proto(ProtoObject()), is_proto(lambda: None), is_proto(None)
def typeof_not_proto():
    typeof("thing")
def this_and_parent():
    seen = []
    def main():
        def method():
            seen.append((this(), parent()))
        this().method = method
        this().method()
        return this()
    obj = proto(main)()
    method = obj.get("method")
    return seen == [(method, obj)]

name_tests(
    creates = evals(creates, (True, ["thing"], False)),
    creates_untyped = evals(creates_untyped, []),
    inherits = evals(inherits, ["derived", "base"]),
    inherit_global = warns(inherit_global, InheritWarning),
    invalid = warns(invalid, ArgumentNotice),
    invalid_none = warns(invalid_none, ArgumentNotice),
    oftype_checks = evals(oftype_checks, (True, False, False)),
    is_proto_checks = evals(is_proto_checks, (True, False, False)),
    typeof_not_proto = fails(typeof_not_proto, "TypeError"),
    this_and_parent = evals(this_and_parent, True),
)

def test_warning_categories():
    assert issubclass(InheritWarning, ProtoWarning)
    assert issubclass(ArgumentNotice, ProtoWarning)
    assert issubclass(ProtoWarning, UserWarning)

def test_context_registry():
    context = Context()
    assert context.exc.CycleError.__name__ == "CycleError"
    assert context.exc.InheritWarning is InheritWarning

def test_helpers_follow_active_context():
    context = Context()
    with context:
        obj = proto(lambda: None)
        assert current() is context
    assert obj.context is context

def test_warning_points_at_caller():
    import os
    for call in [lambda context: proto(42), lambda context: context.proto(42)]:
        with warnings.catch_warnings(record=True) as caught, Context() as context:
            warnings.simplefilter("always")
            call(context)
        assert [warning.category for warning in caught] == [ArgumentNotice]
        assert os.path.basename(caught[0].filename) == os.path.basename(__file__)
