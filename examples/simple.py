import sys

from flagset import FlagParser, ParseStatus
from flagset.utils import setup_logging

setup_logging()

parser = FlagParser("simple: greet somebody")
parser.add_bool("help", short="h", help="print usage info")
parser.add_str("name", short="n", help="who to greet", required=True)
parser.add_int("times", short="t", help="how many greetings", default=1)
parser.add_bool("shout", help="upper-case the greeting", default=False)

# Entry point
if __name__ == "__main__":
    errors: list[str] = []
    status, remaining = parser.parse_status(
        sys.argv, ignore_unknown_flags=True, compact_input=True, error_sink=errors
    )
    if parser.first("help", bool):
        parser.render_help()
        sys.exit(0)
    if status != ParseStatus.OK:
        print(f"fail parsing args: {errors[0]}")
        sys.exit(int(status))

    greeting = f"Hello, {parser.first('name', str)}!"
    if parser.first("shout", bool):
        greeting = greeting.upper()
    for _ in range(parser.first("times", int)):
        print(greeting)
    if len(remaining) > 1:
        print(f"left untouched: {remaining[1:]}")
