"""Doc IR: node model, builders and measurement."""

from pprintpy.doc.builders import (
    bracket,
    concat,
    dedent,
    group,
    hardline,
    if_break,
    indent,
    join,
    lines,
    nest,
    nil,
    smart_join,
    softbreak,
    softline,
    text,
    wrap,
)
from pprintpy.doc.convert import DocLike, Pretty, float32_text, float_text, to_doc
from pprintpy.doc.measure import flat_text, flat_width
from pprintpy.doc.model import (
    Concat,
    Doc,
    DocNode,
    Group,
    Hardline,
    IfBreak,
    Nest,
    Nil,
    Softline,
    Text,
)

__all__ = [
    "Concat",
    "Doc",
    "DocLike",
    "DocNode",
    "Group",
    "Hardline",
    "IfBreak",
    "Nest",
    "Nil",
    "Pretty",
    "Softline",
    "Text",
    "bracket",
    "concat",
    "dedent",
    "flat_text",
    "flat_width",
    "float32_text",
    "float_text",
    "group",
    "hardline",
    "if_break",
    "indent",
    "join",
    "lines",
    "nest",
    "nil",
    "smart_join",
    "softbreak",
    "softline",
    "text",
    "to_doc",
    "wrap",
]
