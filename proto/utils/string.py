import io
import re

escape_table = {eval('"\\{}"'.format(c)): c for c in "\\abfnrtv"}
def escape(s):
    quote = None
    buf = io.StringIO()
    for c in s:
        if not quote:
            if c == '"':
                quote = "'"
            elif c == "'":
                quote = '"'

        if c == quote:
            to_add = "\\" + quote
        elif c in escape_table:
            to_add = "\\" + escape_table[c]
        elif ord(c) < 32:
            to_add = "\\x" + format(ord(c), "x").rjust(2, "0")
        else:
            to_add = c
        buf.write(to_add)
    if not quote:
        quote = '"'

    return quote + buf.getvalue() + quote

def flatten(s):
    s = s.strip()
    s = re.sub(r'(\r\n|\r|\n)+', "\\n", s)
    s = re.sub(r"\s+", " ", s)
    return s
