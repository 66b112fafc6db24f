from .testdefs import *
from proto import proto, this, ProtoObject

def test_trace_nesting():
    output = utils.ContentStream()
    with Context() as context:
        def main(cyl):
            this().cyl = cyl
            return this()
        engine = proto(main, "engine")
        with context.logging(output):
            engine(8)
            engine.get("cyl")
    lines = output.read().splitlines()
    assert lines == [
        "<proto #1 [engine]>.invoke(8)",
        ".   <proto #1 [engine]>.set('cyl', 8)",
        "<proto #1 [engine]>.get('cyl')",
    ]

def test_trace_lookup_through_protos():
    output = utils.ContentStream()
    with Context() as context:
        base = ProtoObject()
        base.size = 1
        obj = ProtoObject()
        obj.proto(base, shared=True)
        obj.activated = True
        with context.logging(output):
            obj.get("size")
    lines = output.read().splitlines()
    assert lines == [
        "<proto #2>.get('size')",
        ".   <proto #1>.has('size')",
        ".   <proto #1>.get('size', None)",
    ]

def test_trace_suspended():
    output = utils.ContentStream()
    with Context() as context:
        obj = ProtoObject()
        with context.logging(output) as tracer:
            obj.set("a", 1)
            with ~tracer:
                obj.set("b", 2)
            obj.get("b")
    lines = output.read().splitlines()
    assert lines == [
        "<proto #1>.set('a', 1)",
        ".   <proto #1>.invoke()",
        "<proto #1>.get('b')",
    ]
    assert context.tracer is None

def test_trace_long_args():
    output = utils.ContentStream()
    with Context() as context:
        obj = ProtoObject()
        obj.activated = True
        with context.logging(output):
            obj.set("text", "x" * 100)
    line = output.read().splitlines()[0]
    assert line.startswith("<proto #1>.set('text', str<'xxx")
    assert line.endswith("..>)")
    assert len(line) < 100
