import pytest

from plotopts.errors import (
    ArgumentIncorrectTypeError,
    InvalidOptionFormatError,
    MissingArgumentError,
    OptionExistsError,
    OptionNotExistsError,
    OptionNotPresentError,
    OptionRequiresArgumentError,
    OptionSyntaxError,
)
from plotopts.options import KeyValue, Option, Options
from plotopts.values import value


def make_options():
    options = Options("prog", "A test")
    options.add_options()(
        "v,verbose", "Be verbose"
    )("a,all", "All")(
        "f,file", "Input file", value(str)
    )("n,number", "A number", value(int))(
        "l,list", "Items", value(list[str])
    )
    return options


def test_bool_flag_counts_and_value():
    result = make_options().parse(["prog", "--verbose", "-v"])
    assert result.count("verbose") == 2
    assert result.count("v") == 2
    assert result["verbose"].get() is True


def test_unset_bool_uses_default_false():
    result = make_options().parse(["prog"])
    assert result.count("verbose") == 0
    assert result["verbose"].get() is False
    assert result["verbose"].has_default is True


def test_long_option_with_equals_and_next_argument():
    result = make_options().parse(["prog", "--file=a.txt", "--number", "42"])
    assert result["file"].get() == "a.txt"
    assert result["n"].get() == 42
    assert result.unmatched == []


def test_short_option_takes_next_argument():
    result = make_options().parse(["prog", "-f", "data.csv"])
    assert result["f"].get() == "data.csv"


def test_grouped_short_flags():
    result = make_options().parse(["prog", "-va"])
    assert result.count("v") == 1
    assert result.count("a") == 1


def test_grouped_short_with_argument_last():
    result = make_options().parse(["prog", "-vf", "x"])
    assert result["file"].get() == "x"
    assert result["verbose"].get() is True


def test_grouped_short_needing_argument_not_last():
    with pytest.raises(OptionRequiresArgumentError):
        make_options().parse(["prog", "-fv", "x"])


def test_missing_argument():
    with pytest.raises(MissingArgumentError):
        make_options().parse(["prog", "--file"])


def test_unknown_options_raise():
    with pytest.raises(OptionNotExistsError):
        make_options().parse(["prog", "--nothing"])
    with pytest.raises(OptionNotExistsError):
        make_options().parse(["prog", "-z"])


def test_unknown_long_option_kept_when_allowed():
    options = make_options().allow_unrecognised_options()
    result = options.parse(["prog", "--nothing", "-zv"])
    assert result.unmatched == ["--nothing"]
    assert result.count("verbose") == 1


def test_bad_syntax_raises():
    with pytest.raises(OptionSyntaxError):
        make_options().parse(["prog", "---x"])
    with pytest.raises(OptionSyntaxError):
        make_options().parse(["prog", "-=x"])


def test_single_dash_is_plain_argument():
    result = make_options().parse(["prog", "-"])
    assert result.unmatched == ["-"]


def test_bad_integer_raises():
    with pytest.raises(ArgumentIncorrectTypeError):
        make_options().parse(["prog", "--number=abc"])


def test_container_accumulates():
    result = make_options().parse(["prog", "--list", "a,b", "--list=c"])
    assert result["list"].get() == ["a", "b", "c"]
    assert result.count("list") == 2


def test_unmatched_arguments_preserved_in_order():
    argv = ["prog", "one", "-v", "two"]
    result = make_options().parse(argv)
    assert result.unmatched == ["one", "two"]
    assert argv == ["prog", "one", "-v", "two"]


def test_positional_arguments():
    options = Options("prog")
    options.add_options()("input", "Input", value(str))("rest", "Rest", value(list[str]))
    options.parse_positional(["input", "rest"])
    result = options.parse(["prog", "a", "b", "c"])
    assert result["input"].get() == "a"
    assert result["rest"].get() == ["b", "c"]


def test_positional_skips_option_already_given():
    options = Options("prog")
    options.add_options()("input", "Input", value(str))
    options.parse_positional("input")
    result = options.parse(["prog", "--input", "x", "y"])
    assert result["input"].get() == "x"
    assert result.unmatched == ["y"]


def test_double_dash_sends_rest_to_positional():
    options = Options("prog")
    options.add_options()("rest", "Rest", value(list[str]))("v", "Verbose")
    options.parse_positional(["rest"])
    result = options.parse(["prog", "--", "-v", "x"])
    assert result["rest"].get() == ["-v", "x"]
    assert result.count("v") == 0


def test_double_dash_without_positional_keeps_rest():
    result = make_options().parse(["prog", "--", "-v", "x"])
    assert result.unmatched == ["-v", "x"]
    assert result.count("v") == 0


def test_unknown_positional_target_raises():
    options = Options("prog")
    options.parse_positional("missing")
    with pytest.raises(OptionNotExistsError):
        options.parse(["prog", "x"])


def test_default_value_used_when_absent():
    options = Options("prog")
    options.add_options()("level", "Level", value(int).default_value("7"))
    result = options.parse(["prog"])
    assert result["level"].get() == 7
    assert result.count("level") == 0
    assert result["level"].has_default is True


def test_implicit_value():
    options = Options("prog")
    options.add_options()("color", "Colour", value(str).implicit_value("auto"))
    assert options.parse(["prog", "--color"])["color"].get() == "auto"
    assert options.parse(["prog", "--color=never"])["color"].get() == "never"
    result = options.parse(["prog", "--color", "next"])
    assert result["color"].get() == "auto"
    assert result.unmatched == ["next"]


def test_arguments_in_sequence():
    result = make_options().parse(["prog", "-n", "5", "--file=x", "-v"])
    assert result.arguments == [
        KeyValue("number", "5"),
        KeyValue("file", "x"),
        KeyValue("verbose", "true"),
    ]
    assert result.arguments[0].parsed(int) == 5
    assert result.arguments[2].parsed(bool) is True


def test_unknown_result_lookup():
    result = make_options().parse(["prog"])
    assert result.count("nothing") == 0
    with pytest.raises(OptionNotPresentError):
        result["nothing"]


def test_get_without_value_raises():
    result = make_options().parse(["prog"])
    with pytest.raises(ValueError):
        result["file"].get()


def test_duplicate_option_raises():
    options = make_options()
    with pytest.raises(OptionExistsError):
        options.add_options()("verbose", "Again")


@pytest.mark.parametrize("spec", ["", "a,b", "-x", ",long"])
def test_invalid_specifier(spec):
    with pytest.raises(InvalidOptionFormatError):
        Options("prog").add_options()(spec, "Bad")


def test_single_letter_specifier_is_short():
    options = Options("prog")
    options.add_options()("x", "Ex")
    result = options.parse(["prog", "-x"])
    assert result.count("x") == 1
    assert options.group_help("").options[0].short == "x"
    assert options.group_help("").options[0].long == ""


def test_add_options_with_option_objects():
    options = Options("prog")
    options.add_options("io", Option("o,output", "Output", value(str)), Option("q", "Quiet"))
    result = options.parse(["prog", "-o", "out", "-q"])
    assert result["output"].get() == "out"
    assert result.count("q") == 1
    assert [o.long for o in options.group_help("io").options] == ["output", ""]


def test_groups_sorted():
    options = Options("prog")
    options.add_option("zeta", "z", "", "Z")
    options.add_option("alpha", "", "aa", "A", value(str), "NAME")
    assert options.groups() == ["alpha", "zeta"]
    assert options.group_help("alpha").options[0].arg_help == "NAME"
    with pytest.raises(KeyError):
        options.group_help("missing")


def test_help_text_simple():
    options = Options("prog", "A test")
    options.add_options()("h,help", "Print help")
    assert options.help() == (
        "A test\nUsage:\n  prog [OPTION...]\n\n  -h, --help  Print help\n"
    )


def test_help_hides_positional_unless_shown():
    options = Options("prog")
    options.add_options()("input", "The input", value(str))("v,verbose", "Verbose")
    options.parse_positional("input")
    text = options.help()
    assert "positional parameters" in text
    assert "--input" not in text
    assert "--verbose" in text
    options.show_positional_help()
    assert "--input" in options.help()


def test_help_custom_and_groups():
    options = Options("prog").custom_help("[FLAGS]").positional_help("FILES")
    options.add_option("extra", "", "depth", "Depth", value(int).default_value("3"))
    options.parse_positional("files")
    text = options.help(["extra"])
    assert text.startswith("\nUsage:\n  prog [FLAGS] FILES\n\n")
    assert " extra options:\n" in text
    assert "(default: 3)" in text
    assert options.help(["missing"]).endswith("\n\n")