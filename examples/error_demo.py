"""
Error reporting demonstration for jsontree.
"""

import jsontree
from jsontree import ParseConfig, ParseError


def main():
    print("jsontree - Error Reporting Demo")
    print("=" * 31)

    broken = [
        ('{"key": }', "Missing value"),
        ('{"key" "value"}', "Missing colon"),
        ('{"a": 1,}', "Trailing comma"),
        ("{'a': 1}", "Single-quoted key"),
        ('["unterminated', "Unclosed string"),
        ("[1.]", "Fraction without digits"),
        ('"\\x41"', "Unknown escape"),
        ("True", "Python literal"),
        ("[1] [2]", "Two top-level values"),
    ]

    for i, (json_str, description) in enumerate(broken, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str}")
        try:
            jsontree.parse(json_str)
        except ParseError as e:
            print(f"{type(e).__name__} ({e.kind.value}):")
            print(str(e))

    print(f"\n{len(broken) + 1}. Plain messages")
    config = ParseConfig(include_context=False, include_suggestions=False)
    try:
        jsontree.parse("[1, 2", config=config)
    except ParseError as e:
        print(str(e))


if __name__ == "__main__":
    main()
