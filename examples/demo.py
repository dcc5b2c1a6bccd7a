"""
jsonsalvage demonstration script.
"""

import jsonsalvage


def main():
    print("jsonsalvage - LLM Completion Recovery Demo")
    print("=" * 42)

    examples = [
        # Fenced output
        ('```json\n{"score": 8}\n```', "Markdown code fence"),
        # Chatty model
        ('Sure! Here you go: {"score": 8} Hope that helps! 😊', "Surrounding prose"),
        # Trailing commas
        ('{"events": ["arrival", "circle time",],}', "Trailing commas"),
        # Cut off by the output token limit
        ('{"emotions": [{"t": "00:05", "label": "calm"}, {"t": "00:09"', "Truncated output"),
        # Control characters
        ('{"note":\x00 "ok"\x1b}', "Control characters"),
        # Unescaped quotes cannot be repaired
        ('{"quote": "she said "no" twice"}', "Unescaped inner quotes"),
        # Empty response
        ("   ", "Empty completion"),
    ]

    for i, (completion, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:   {completion!r}")

        result = jsonsalvage.recover(completion)
        if result.ok:
            print(f"Output:  {result.value}")
            print(f"Repairs: {[action.value for action in result.repairs]}")
        else:
            print(f"Failed:  {result.kind.value}: {result.error}")


if __name__ == "__main__":
    main()
