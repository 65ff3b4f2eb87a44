"""config_loading.py"""
import sys
from pathlib import Path

from flagset.config import loader
from flagset.exceptions import FlagParseError

parser = loader(Path(__file__).parent / "flags.yaml")

if __name__ == "__main__":
    try:
        remaining = parser.parse(sys.argv, compact_input=True)
    except FlagParseError as error:
        print(f"fail parsing args: {error}")
        print(parser.get_usage())
        sys.exit(error.code)

    print(f"port={parser.first('port', int)} hosts={parser.get('host', str)}")
    print(f"positional: {remaining[1:]}")
