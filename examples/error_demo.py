"""
Failure reporting demonstration for jsonsalvage.
"""

import logging

import jsonsalvage
from jsonsalvage import RecoveryConfig, RecoveryError, RecoveryLimits, Shape


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("jsonsalvage - Failure Reporting Demo")
    print("=" * 36)

    # Example 1: Failure as a value
    print("\n1. Failure Result")
    result = jsonsalvage.recover('{"summary": "The child pla')
    print(f"ok={result.ok} kind={result.kind.value}")
    print(f"error={result.error}")
    print(f"excerpt={result.excerpt!r}")

    # Example 2: Exception style with suggestions
    print("\n2. RecoveryError with Suggestions")
    try:
        jsonsalvage.loads('{"quote": "she said "no" twice"}')
    except RecoveryError as e:
        print("Error caught:")
        print(str(e))

    # Example 3: Limits
    print("\n3. Limit Exceeded")
    config = RecoveryConfig(limits=RecoveryLimits(max_input_size=16))
    result = jsonsalvage.recover('{"a": "a long completion"}', config)
    print(f"kind={result.kind.value} error={result.error}")

    # Example 4: Conservative preset refuses to close truncated output
    print("\n4. Conservative Preset")
    result = jsonsalvage.recover('{"a": [1, 2', RecoveryConfig.conservative())
    print(f"ok={result.ok}")

    # Example 5: Expected shape
    print("\n5. Expected Array")
    participants = jsonsalvage.loads(
        'Example: {"id": "x"}. Participants: [{"id": "person_1"}]',
        expect=Shape.ARRAY,
    )
    print(f"participants={participants}")


if __name__ == "__main__":
    main()
