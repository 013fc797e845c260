from flagbind.parser import ParamParser, Slot


def build_parser() -> ParamParser:
    parser = ParamParser()
    parser.add_param("int", "--iterations", "The number of iterations to perform.")
    parser.add_param(
        "float", "--seeds", "The seeds to begin simulation.", arity=3, required=False
    )
    parser.add_param(
        "string", "--name", "The name for this simulation run.", default="simulation"
    )
    parser.add_param("double", "--files", "Input weights.", arity=-1, default="3.14")
    parser.add_help(Slot())
    return parser


def test_format_help():
    text = build_parser().format_help()
    assert text == (
        "\t--files\n"
        "\t\tInput weights.\n"
        "\t\tany number of arguments of type double.\n"
        "\t\tdefault: '3.14'\n"
        "\t--help\n"
        "\t\tPrints this help message.\n"
        "\t\tdefault: ''\n"
        "\t--iterations\n"
        "\t\tThe number of iterations to perform.\n"
        "\t\t1 argument of type int.\n"
        "\t--name\n"
        "\t\tThe name for this simulation run.\n"
        "\t\t1 argument of type string.\n"
        "\t\tdefault: 'simulation'\n"
        "\t--seeds\n"
        "\t\tThe seeds to begin simulation.\n"
        "\t\t3 arguments of type float.\n"
        "\t\tdefault: ''\n"
    )


def test_help_contains_every_name_and_help_text():
    parser = build_parser()
    text = parser.format_help()
    for name in ("--files", "--help", "--iterations", "--name", "--seeds"):
        param = parser.get_param(name)
        assert param.name in text
        assert param.help in text
        if not param.required:
            assert f"default: '{param.default}'" in text


def test_help_for_required_has_no_default():
    parser = ParamParser()
    parser.add_param("uint", "--count", "How many.", default="5", required=True)
    text = parser.format_help()
    assert "1 argument of type unsigned int." in text
    assert "default" not in text


def test_help_is_pure():
    parser = build_parser()
    assert parser.format_help() == parser.format_help()
    assert parser.get_param("--help").value is False


def test_empty_help():
    assert ParamParser().format_help() == ""


def test_print_help(capsys):
    build_parser().print_help()
    captured = capsys.readouterr()
    assert "--iterations" in captured.out
    assert "The seeds to begin simulation." in captured.out
    assert "default: 'simulation'" in captured.out
