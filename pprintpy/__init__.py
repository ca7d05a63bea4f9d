"""Width-aware pretty printing over a Doc intermediate representation."""

from pprintpy.diagnostics import DiagnosticSpec, DocumentError
from pprintpy.doc import (
    Concat,
    Doc,
    DocLike,
    DocNode,
    Group,
    Hardline,
    IfBreak,
    Nest,
    Nil,
    Pretty,
    Softline,
    Text,
    bracket,
    concat,
    dedent,
    flat_text,
    flat_width,
    float32_text,
    float_text,
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
    to_doc,
    wrap,
)
from pprintpy.dtoa import format_f32, format_f64
from pprintpy.justify import justify, justify_breaks
from pprintpy.printer import Mode, PrinterOptions, render

__all__ = [
    "Concat",
    "DiagnosticSpec",
    "Doc",
    "DocLike",
    "DocNode",
    "DocumentError",
    "Group",
    "Hardline",
    "IfBreak",
    "Mode",
    "Nest",
    "Nil",
    "Pretty",
    "PrinterOptions",
    "Softline",
    "Text",
    "bracket",
    "concat",
    "dedent",
    "flat_text",
    "flat_width",
    "float32_text",
    "float_text",
    "format_f32",
    "format_f64",
    "group",
    "hardline",
    "if_break",
    "indent",
    "join",
    "justify",
    "justify_breaks",
    "lines",
    "nest",
    "nil",
    "render",
    "smart_join",
    "softbreak",
    "softline",
    "text",
    "to_doc",
    "wrap",
]
