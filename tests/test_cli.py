import json

from typer.testing import CliRunner

from assertgen.cli import app

runner = CliRunner()


def test_generate_from_file(tmp_path):
    tokens = tmp_path / "names.txt"
    tokens.write_text("Assert_notNULL\n\nAssertStringEQ\nnot_a_macro\n")
    out = tmp_path / "include" / "assertions.h"

    result = runner.invoke(app, ["generate", str(tokens), "--output", str(out)])

    assert result.exit_code == 0
    text = out.read_text()
    assert text.startswith("#ifndef ASSERTIONS_H\n")
    assert "#define Assert_notNULL(expr, ...)" in text
    assert "#define String_compare(a, b) strcmp((a), (b))" in text
    assert "not_a_macro" not in text


def test_generate_from_stdin():
    result = runner.invoke(app, ["generate"], input="Assert\nFail_if0x10\n")
    assert result.exit_code == 0
    assert "(expr) != 16" in result.output
    assert "#define Assert(expr, ...)" in result.output


def test_generate_multiple_files_in_order(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("Assert_true\n")
    second.write_text("Assert_false\n")
    out = tmp_path / "out.h"

    result = runner.invoke(
        app, ["generate", str(first), str(second), "-o", str(out)]
    )

    assert result.exit_code == 0
    text = out.read_text()
    assert text.index("#define Assert_true") < text.index("#define Assert_false")


def test_generate_is_repeatable(tmp_path):
    tokens = tmp_path / "names.txt"
    tokens.write_text("Assert_FooEQ\nAssert_BarGT\nAssert_LT\nAssert_notSame\n")
    out1 = tmp_path / "one.h"
    out2 = tmp_path / "two.h"

    runner.invoke(app, ["generate", str(tokens), "-o", str(out1)])
    runner.invoke(app, ["generate", str(tokens), "-o", str(out2)])

    assert out1.read_text() == out2.read_text()


def test_generate_scan_mode(tmp_path):
    source = tmp_path / "test_list.c"
    source.write_text(
        "void test_push(void) {\n"
        "    Assert_notNULL(list);\n"
        "    Assert_EQ(list_len(list), 1);\n"
        "}\n"
    )
    out = tmp_path / "out.h"

    result = runner.invoke(app, ["generate", "--scan", str(source), "-o", str(out)])

    assert result.exit_code == 0
    text = out.read_text()
    assert "#define Assert_notNULL(expr, ...)" in text
    assert "#define Assert_EQ(Number1, Number2, ...)" in text
    assert "test_push" not in text


def test_generate_reports_unresolved(tmp_path):
    out = tmp_path / "out.h"
    result = runner.invoke(
        app, ["generate", "-o", str(out)], input="Assert_FooEQ\n"
    )
    assert result.exit_code == 0
    assert "unresolved dependencies: Foo_compare" in result.output
    assert "int Foo_compare(Foo a, Foo b)" in out.read_text()


def test_generate_unrecognized_still_succeeds(tmp_path):
    out = tmp_path / "out.h"
    result = runner.invoke(
        app, ["generate", "-o", str(out)], input="Assert_Bogus123\nAssert\n"
    )
    assert result.exit_code == 0
    text = out.read_text()
    assert "_Static_assert(0," in text
    assert "#define Assert(expr, ...)" in text


def test_generate_missing_input_file():
    result = runner.invoke(app, ["generate", "/tmp/nonexistent-assertgen-names.txt"])
    assert result.exit_code != 0


def test_generate_missing_config():
    result = runner.invoke(
        app, ["generate", "--config", "nonexistent.yaml"], input="Assert\n"
    )
    assert result.exit_code != 0


def test_generate_with_config(tmp_yaml, tmp_path):
    config = tmp_yaml("""\
        guard: CK_ASSERT_H
        report_function: ck_report
    """)
    out = tmp_path / "out.h"
    result = runner.invoke(
        app,
        ["generate", "--config", str(config), "-o", str(out)],
        input="Assert_Same\n",
    )
    assert result.exit_code == 0
    text = out.read_text()
    assert text.startswith("#ifndef CK_ASSERT_H\n")
    assert "ck_report((arg1) == (arg2)" in text


def test_generate_invalid_config(tmp_yaml):
    config = tmp_yaml("""\
        guard: "not valid"
    """)
    result = runner.invoke(
        app, ["generate", "--config", str(config)], input="Assert\n"
    )
    assert result.exit_code == 1
    assert "Error" in result.output


def test_generate_guard_option(tmp_path):
    out = tmp_path / "out.h"
    result = runner.invoke(
        app, ["generate", "--guard", "MY_H", "-o", str(out)], input="Assert\n"
    )
    assert result.exit_code == 0
    assert out.read_text().endswith("#endif /* MY_H */\n")


def test_generate_invalid_guard_option():
    result = runner.invoke(app, ["generate", "--guard", "9bad"], input="Assert\n")
    assert result.exit_code == 1


def test_generate_debug_log(tmp_path):
    log = tmp_path / "logs" / "debug.log"
    out = tmp_path / "out.h"
    result = runner.invoke(
        app,
        ["generate", "--debug-log", str(log), "-o", str(out)],
        input="Assert_LT\n",
    )
    assert result.exit_code == 0
    content = log.read_text()
    assert "Synthesized Assert_LT" in content
    assert "Resolving builtin comparator Number_compare" in content


def test_parse_command():
    result = runner.invoke(app, ["parse", "Assert_notNULL", "Foo_compare"])
    assert result.exit_code == 0
    assert "Assert_notNULL: assertion" in result.output
    assert "condition:  null_check" in result.output
    assert "expression: (expr) != NULL" in result.output
    assert "Foo_compare: comparator for Foo" in result.output


def test_parse_command_relational_shows_type():
    result = runner.invoke(app, ["parse", "AssertStringEQ"])
    assert result.exit_code == 0
    assert "type:       String" in result.output
    assert "args:       String1, String2" in result.output


def test_parse_command_unrecognized():
    result = runner.invoke(app, ["parse", "Assert_Bogus123"])
    assert result.exit_code == 1
    assert "unrecognized" in result.output


def test_schema_stdout():
    result = runner.invoke(app, ["schema"])
    assert result.exit_code == 0
    schema = json.loads(result.output)
    assert "report_function" in schema["properties"]


def test_schema_writes_file(tmp_path):
    out = tmp_path / "schemas" / "assertgen.schema.json"
    result = runner.invoke(app, ["schema", "--out", str(out)])
    assert result.exit_code == 0
    assert json.loads(out.read_text())["additionalProperties"] is False
