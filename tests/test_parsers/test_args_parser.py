import pytest

from whim.exceptions import BadFlagError, MalformedArgumentError
from whim.parser import Command, Flag, FlagKind, ParseVocabulary, Value, parse

FLAG0 = Flag("flag0", FlagKind.UINT)
FLAG1 = Flag("flag1", FlagKind.BOOL)
FLAG2 = Flag("flag2", FlagKind.INT)
FLAG3 = Flag("f", FlagKind.BOOL)
FLAG4 = Flag("flag4", FlagKind.STRING)
FLAG5 = Flag("flag5", FlagKind.INT)
COMMAND = Command("command")


@pytest.fixture
def vocabulary():
    return (
        ParseVocabulary()
        .flag(FLAG0)
        .flag(FLAG1)
        .flag(FLAG2)
        .flag(FLAG3)
        .flag(FLAG4)
        .flag(FLAG5)
        .command(COMMAND)
    )


def test_mixed_arguments(vocabulary):
    parsed = vocabulary.parse(
        [
            "command",
            "--flag0",
            "123",
            "--flag1",
            "true",
            "-f",
            "--flag4",
            "command",
            "--flag5",
            "-2",
        ]
    )

    flags = parsed.flags()
    assert flags[FLAG0] == Value(FlagKind.UINT, 123)
    assert flags[FLAG1] == Value(FlagKind.BOOL, True)
    assert flags[FLAG2] is None
    assert flags[FLAG3] == Value(FlagKind.BOOL, True)
    assert flags[FLAG4] == Value(FlagKind.STRING, "command")
    assert flags[FLAG5] == Value(FlagKind.INT, -2)
    assert parsed.commands() == [COMMAND]


def test_parse_function_matches_method(vocabulary):
    tokens = ["command", "--flag0", "7"]
    assert parse(tokens, vocabulary).flags() == vocabulary.parse(tokens).flags()


def test_empty_input(vocabulary):
    parsed = vocabulary.parse([])
    assert parsed.commands() == []
    assert parsed.flags() == {
        FLAG0: None,
        FLAG1: None,
        FLAG2: None,
        FLAG3: None,
        FLAG4: None,
        FLAG5: None,
    }


def test_invalid_int_value(vocabulary):
    with pytest.raises(MalformedArgumentError) as excinfo:
        vocabulary.parse(["--flag2", "abc"])
    assert excinfo.value.token == "abc"


def test_unknown_flag(vocabulary):
    with pytest.raises(BadFlagError) as excinfo:
        vocabulary.parse(["--unknown"])
    assert excinfo.value.name == "unknown"


def test_unknown_single_char_flag(vocabulary):
    with pytest.raises(BadFlagError):
        vocabulary.parse(["-x"])


@pytest.mark.parametrize("token", ["-flag1", "-", "-ff"])
def test_malformed_dash_syntax(vocabulary, token):
    with pytest.raises(MalformedArgumentError) as excinfo:
        vocabulary.parse([token])
    assert excinfo.value.token == token


def test_double_dash_alone_is_bad_flag(vocabulary):
    with pytest.raises(BadFlagError):
        vocabulary.parse(["--"])


@pytest.mark.parametrize("token", ["-f", "--f"])
def test_single_char_flag_accepts_one_or_two_dashes(vocabulary, token):
    assert vocabulary.parse([token]).flags()[FLAG3] == Value(FlagKind.BOOL, True)


@pytest.mark.parametrize(
    "flag, token, expected",
    [
        (FLAG4, "command", Value(FlagKind.STRING, "command")),
        (FLAG4, "--flag1", Value(FlagKind.STRING, "--flag1")),
        (FLAG4, "-f", Value(FlagKind.STRING, "-f")),
        (FLAG4, "--unknown", Value(FlagKind.STRING, "--unknown")),
        (FLAG5, "-2", Value(FlagKind.INT, -2)),
        (FLAG0, "+5", Value(FlagKind.UINT, 5)),
    ],
)
def test_value_flags_claim_next_token(vocabulary, flag, token, expected):
    parsed = vocabulary.parse([f"--{flag.name}", token])
    assert parsed.flags()[flag] == expected
    assert parsed.commands() == []


@pytest.mark.parametrize("token", ["command", "-f", "--flag1"])
def test_value_flag_claim_failure_is_malformed(vocabulary, token):
    with pytest.raises(MalformedArgumentError) as excinfo:
        vocabulary.parse(["--flag0", token])
    assert excinfo.value.token == token


def test_bool_flag_followed_by_command(vocabulary):
    parsed = vocabulary.parse(["--flag1", "command"])
    assert parsed.flags()[FLAG1] == Value(FlagKind.BOOL, True)
    assert parsed.commands() == [COMMAND]


def test_bool_flag_followed_by_flag(vocabulary):
    parsed = vocabulary.parse(["--flag1", "--flag0", "1"])
    flags = parsed.flags()
    assert flags[FLAG1] == Value(FlagKind.BOOL, True)
    assert flags[FLAG0] == Value(FlagKind.UINT, 1)


def test_bool_flag_takes_explicit_value(vocabulary):
    assert vocabulary.parse(["--flag1", "false"]).flags()[FLAG1] == Value(
        FlagKind.BOOL, False
    )


def test_bool_flag_rejects_non_boolean_value(vocabulary):
    with pytest.raises(MalformedArgumentError) as excinfo:
        vocabulary.parse(["--flag1", "yes"])
    assert excinfo.value.token == "yes"


def test_value_flag_without_value_is_none(vocabulary):
    parsed = vocabulary.parse(["--flag4", "x", "--flag0"])
    assert parsed.flags()[FLAG0] is None


def test_value_flag_followed_by_value_flag_claims_it_as_text(vocabulary):
    parsed = vocabulary.parse(["--flag4", "--flag0"])
    assert parsed.flags()[FLAG4] == Value(FlagKind.STRING, "--flag0")
    assert parsed.flags()[FLAG0] is None


def test_last_write_wins(vocabulary):
    parsed = vocabulary.parse(["--flag0", "1", "--flag0", "2", "--flag1", "false", "-f"])
    assert parsed.flags()[FLAG0] == Value(FlagKind.UINT, 2)
    assert parsed.flags()[FLAG1] == Value(FlagKind.BOOL, False)

    parsed = vocabulary.parse(["--flag1", "false", "--flag1"])
    assert parsed.flags()[FLAG1] == Value(FlagKind.BOOL, True)


def test_bare_values_are_strings(vocabulary):
    parsed = vocabulary.parse(["notes.md", "command"])
    assert parsed.commands() == [COMMAND]
    assert parsed.operands(COMMAND) == []


def test_duplicate_commands_are_kept():
    scan = Command("scan")
    new = Command("new")
    parsed = ParseVocabulary().command(scan).command(new).parse(["scan", "new", "scan"])
    assert parsed.commands() == [scan, new, scan]


def test_absent_flags_independent_of_declaration_order():
    flags = [FLAG0, FLAG1, FLAG4]
    forward = ParseVocabulary(flags=flags).parse(["--flag0", "3"]).flags()
    backward = ParseVocabulary(flags=reversed(flags)).parse(["--flag0", "3"]).flags()
    assert forward == backward
    assert forward[FLAG1] is None
    assert forward[FLAG4] is None


def test_operands():
    add = Command("add", args=("path",))
    scan = Command("scan")
    force = Flag("force")
    vocabulary = ParseVocabulary(commands=[add, scan], flags=[force])

    parsed = vocabulary.parse(["add", "a.md", "b.md", "--force", "c.md"])
    assert parsed.operands(add) == [
        Value(FlagKind.STRING, "a.md"),
        Value(FlagKind.STRING, "b.md"),
    ]
    assert parsed.operands(scan) == []

    parsed = vocabulary.parse(["add", "a.md", "scan", "x", "add", "b.md"])
    assert parsed.operands(add) == [
        Value(FlagKind.STRING, "a.md"),
        Value(FlagKind.STRING, "b.md"),
    ]
    assert parsed.operands(scan) == [Value(FlagKind.STRING, "x")]


def test_accepts_lazy_iterables(vocabulary):
    tokens = iter(["command", "--flag0", "9"])
    parsed = vocabulary.parse(token for token in tokens)
    assert parsed.flags()[FLAG0] == Value(FlagKind.UINT, 9)


def test_rejects_single_string(vocabulary):
    with pytest.raises(TypeError):
        vocabulary.parse("command")


def test_rejects_non_string_tokens(vocabulary):
    with pytest.raises(TypeError):
        vocabulary.parse(["--flag0", 1])


def test_result_is_unaffected_by_later_declarations():
    verbose = Flag("verbose")
    vocabulary = ParseVocabulary().flag(verbose)
    parsed = vocabulary.parse(["--verbose"])
    vocabulary.flag(Flag("quiet"))
    assert list(parsed.flags()) == [verbose]


def test_parse_errors_discard_progress(vocabulary):
    with pytest.raises(BadFlagError):
        vocabulary.parse(["command", "--flag0", "1", "--nope"])
