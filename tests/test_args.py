import pytest

from argkit import parse
from argkit.tokens import ArgName, FlagArg, OptionArg, PositionalArg, argDef

# --- Queries ---------------------------------------------------------------- #


def test_has_flag_unknown():
    assert not parse(["a"]).hasFlag("a")
    assert not parse([]).hasFlag("")


def test_accessors_return_copies():
    args = parse(["-v", "--name=x", "pos"])

    args.positionals().append("other")
    args.flags().add("other")
    args.options()["other"] = "y"

    assert args.positionals() == ["pos"]
    assert args.flags() == {"v"}
    assert args.options() == {"name": "x"}


def test_iterate_arguments():
    args = parse(["-v", "--name", "x", "pos"])
    assert list(args) == [
        FlagArg(ArgName("v", True)),
        OptionArg(ArgName("name"), "x"),
        PositionalArg("pos"),
    ]
    assert len(args) == 3


def test_find():
    args = parse(["-o", "a.txt", "--output=b.txt", "-v"])
    verbose = argDef("v", "verbose")
    output = argDef("o", "output")

    assert args.find(verbose) == FlagArg(ArgName("v", True))
    assert args.find(output) == OptionArg(ArgName("o", True), "a.txt")
    assert args.find(argDef("q", "quiet")) is None


def test_find_returns_first_occurrence():
    args = parse(["--output=a", "--output=b"])
    found = args.find(argDef("o", "output"))
    assert found == OptionArg(ArgName("output"), "a")
    assert args.getOption("output") == "b"


def test_find_all():
    args = parse(["-o", "a.txt", "--output=b.txt", "-v", "in.txt"])

    assert args.findAll(PositionalArg) == [PositionalArg("in.txt")]
    assert args.findAll(FlagArg) == [FlagArg(ArgName("v", True))]
    assert [o.value for o in args.findAll(OptionArg, argDef("o", "output"))] == [
        "a.txt",
        "b.txt",
    ]


# --- Typed extraction ------------------------------------------------------- #


def test_get_as_int():
    args = parse(["--count=3", "-n", "+7", "--offset=-2"])
    assert args.getAs("count", int) == 3
    assert args.getAs("n", int) == 7
    assert args.getAs("offset", int) == -2


def test_get_as_default():
    args = parse([])
    assert args.getAs("count", int) is None
    assert args.getAs("count", int, 10) == 10


def test_get_as_bool():
    args = parse(["--fast", "--color=no", "--debug=yes"])
    assert args.getAs("fast", bool) is True
    assert args.getAs("color", bool) is False
    assert args.getAs("debug", bool) is True
    assert args.getAs("quiet", bool, False) is False


def test_get_as_float_and_str():
    args = parse(["--ratio", "0.5", "--name=foo"])
    assert args.getAs("ratio", float) == 0.5
    assert args.getAs("name", str) == "foo"


def test_get_as_invalid():
    args = parse(["--count=many"])
    with pytest.raises(ValueError, match="Invalid value for 'count'"):
        args.getAs("count", int)


def test_get_as_unsupported_type():
    args = parse(["--count=3"])
    with pytest.raises(TypeError):
        args.getAs("count", complex)


def test_get_list():
    args = parse(["--values=1,2,3", "--names", "foo, bar"])
    assert args.getList("values", int) == [1, 2, 3]
    assert args.getList("names", str) == ["foo", "bar"]
    assert args.getList("missing", int) == []


def test_get_list_invalid():
    args = parse(["--values=1,x"])
    with pytest.raises(ValueError):
        args.getList("values", int)
