import pytest

from flagset.parser import FlagParser


@pytest.fixture
def typed_parser() -> FlagParser:
    """One optional, one required and one defaulted flag of every kind."""
    parser = FlagParser("main desc:")
    parser.add_str("string", help="not required string")
    parser.add_str("string_req", short="s", help="required string", required=True)
    parser.add_str("string_def", help="string with default value", default="default")
    parser.add_int("int", help="not required int")
    parser.add_int("int_req", short="i", help="required int", required=True)
    parser.add_int("int_def", help="int with default value", default=10)
    parser.add_long("long", help="not required long")
    parser.add_long("long_req", short="l", help="required long", required=True)
    parser.add_long("long_def", help="long with default value", default=9)
    parser.add_long_long("long_long", help="not required long long")
    parser.add_long_long(
        "long_long_req", short="t", help="required long long", required=True
    )
    parser.add_long_long("long_long_def", help="long long with default value", default=8)
    parser.add_double("double", help="not required double")
    parser.add_double("double_req", short="d", help="required double", required=True)
    parser.add_double("double_def", help="double with default value", default=7.6)
    parser.add_bool("bool", help="not required bool")
    parser.add_bool("bool_req", short="b", help="required bool", required=True)
    parser.add_bool("bool_def", help="bool with default value", default=True)
    return parser
