"""
jsontree demonstration script.
"""

import jsontree


def main():
    print("jsontree - Strict JSON Parser Demo")
    print("=" * 34)

    examples = [
        ('{"name": "John", "age": 30}', "Simple object"),
        ("[1, 2.5, -3e2, true, false, null]", "Mixed array"),
        ('"caf\\u00e9 \\ud83d\\ude00"', "Unicode escapes and surrogate pairs"),
        ('{"test": "value1", "test": "value2"}', "Duplicate keys (last wins)"),
        (
            """
        {
            "server": {"host": "localhost", "port": 8080, "ssl": false},
            "features": ["auth", "logging"],
            "debug": true
        }
        """,
            "Complex configuration",
        ),
    ]

    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str.strip()}")
        try:
            tree = jsontree.parse(json_str)
            print(f"Tree:   {tree}")
            print(f"Python: {tree.to_python()}")
        except jsontree.JsonTreeError as e:
            print(f"Error:  {e}")

    print(f"\n{len(examples) + 1}. Narrowing values")
    config = jsontree.parse('{"server": {"port": 8080}}')
    port = config.as_object()["server"].as_object()["port"].as_number()
    print(f"Port:   {port}")

    print(f"\n{len(examples) + 2}. Trailing content")
    print("Input:  1 2")
    print(f"Output: {jsontree.parse('1 2', allow_trailing_content=True)}")


if __name__ == "__main__":
    main()
