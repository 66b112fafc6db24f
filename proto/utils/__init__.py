import sys

class Object(dict):
    def __init__(self, **kwargs):
        dict.__init__(self, kwargs)
        self.__dict__ = self
    def __hash__(self):
        return id(self)
    def __getstate__(self):
        return self
    def __setstate__(self, state):
        self.update(state)
        self.__dict__ = self

class Context:
    def __init__(self):
        pass
    def __enter__(self):
        return self
    def __exit__(self, exc_type, exc, tb):
        pass
    def __invert__(self):
        return reverse_context(self)
class reverse_context(Context):
    def __init__(self, context):
        self.context = context
    def __enter__(self):
        self.context.__exit__(None, None, None)
    def __exit__(self, exc_type, exc, tb):
        self.context.__enter__()

class Streams(Context):
    def __init__(self, stdin=None, stdout=None, stderr=None):
        self.stdin  = stdin
        self.stdout = stdout
        self.stderr = stderr
    def __enter__(self):
        self.old_stdin  = sys.stdin
        self.old_stdout = sys.stdout
        self.old_stderr = sys.stderr
        if self.stdin:  sys.stdin  = self.stdin
        if self.stdout: sys.stdout = self.stdout
        if self.stderr: sys.stderr = self.stderr
        return self
    def __exit__(self, exc_type, exc, tb):
        sys.stdin  = self.old_stdin
        sys.stdout = self.old_stdout
        sys.stderr = self.old_stderr
class ContentStream:
    def __init__(self, content=""):
        self.content = content
    def read(self, size=-1):
        if size is None or size < 0:
            s = self.content
            self.content = ""
        else:
            s = self.content[:size]
            self.content = self.content[size:]
        return s
    def write(self, s):
        self.content += s
        return len(s)
    def flush(self):
        pass

