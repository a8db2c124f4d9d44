"""Tests for header assembly."""

from assertgen.assembler import OutputAssembler
from assertgen.model import Macro


def _macro(name: str) -> Macro:
    return Macro(name=name, doc=f"/** {name} */", text=f"#define {name}(x) (x)")


def test_empty_header(registry):
    text = OutputAssembler(guard="EMPTY_H").assemble(registry)
    assert text.startswith("#ifndef EMPTY_H\n#define EMPTY_H\n")
    assert text.endswith("#endif /* EMPTY_H */\n")
    assert "/*\n" not in text
    assert "#include" not in text


def test_section_order(registry):
    registry.require("Foo_compare")
    registry.require_include("string.h")
    assembler = OutputAssembler()
    assembler.add_assertion(_macro("Assert_first"))
    assembler.add_comparator(_macro("Bar_compare"))
    assembler.add_assertion(_macro("Assert_second"))

    text = assembler.assemble(registry)

    positions = [
        text.index("#define ASSERTIONS_H"),
        text.index("int Foo_compare(Foo a, Foo b)"),
        text.index("#include <string.h>"),
        text.index("#define Bar_compare"),
        text.index("#define Assert_first"),
        text.index("#define Assert_second"),
        text.index("#endif /* ASSERTIONS_H */"),
    ]
    assert positions == sorted(positions)


def test_advisory_block_format(registry):
    registry.require("Foo_compare")
    text = OutputAssembler().assemble(registry)
    assert " *   int Foo_compare(Foo a, Foo b)\n" in text
    assert text.index("/*\n") < text.index(" */\n")


def test_includes_deduplicated_config_first(registry):
    registry.require_include("stddef.h")
    registry.require_include("my_test.h")
    text = OutputAssembler(includes=["my_test.h"]).assemble(registry)
    assert text.count("#include <my_test.h>") == 1
    assert text.index("#include <my_test.h>") < text.index("#include <stddef.h>")


def test_macros_separated_by_blank_line(registry):
    assembler = OutputAssembler()
    assembler.add_assertion(_macro("Assert_a"))
    assembler.add_assertion(_macro("Assert_b"))
    text = assembler.assemble(registry)
    assert "#define Assert_a(x) (x)\n\n/** Assert_b */\n#define Assert_b(x) (x)\n\n#endif" in text
