"""Token sets for each output dialect."""

from dataclasses import dataclass

from module_index.output_format import OutputFormat


@dataclass(frozen=True)
class Dialect:
    """Describes the syntax used to print a namespace tree."""

    comment: str
    prologue: str
    epilogue: str
    namespace_open: str  # format string, receives ``name``
    namespace_close: str | None
    alias: str  # format string, receives ``name`` and ``reference``
    separator: str
    body_end: str  # appended after a non-empty body


DIALECTS: dict[OutputFormat, Dialect] = {
    OutputFormat.COFFEE: Dialect(
        comment="#",
        prologue="module.exports = exports =\n",
        epilogue="\n#EOF\n",
        namespace_open="{name}:",
        namespace_close=None,
        alias='{name}: require "{reference}"',
        separator="\n",
        body_end="\n",
    ),
    OutputFormat.JS: Dialect(
        comment="//",
        prologue="module.exports = exports = {\n",
        epilogue="\n};\n//EOF\n",
        namespace_open='"{name}": {{',
        namespace_close="}",
        alias='"{name}": require("{reference}")',
        separator=",\n",
        body_end="",
    ),
}
