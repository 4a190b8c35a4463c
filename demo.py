"""
Result Pattern Demo Script

This script demonstrates the explicit error handling of the client by:
1. Branching on hand-made Success and Failure values
2. Creating a valid post against the live API
3. Creating a post for a user that does not exist
4. Submitting input that fails validation

Needs network access to jsonplaceholder.typicode.com for steps 2-4.
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from post_client.result import Failure, Result, Success
from post_client.main import run, setup_logging
from post_client.api import NetworkError


def demonstrate_result():
    """Show that a Result must be branched on before use."""
    print("\n[1/4] Result values")

    def get_success() -> Result[int, Exception]:
        return Success(1)

    def get_failure() -> Result[int, Exception]:
        return Failure(Exception("error"))

    success = get_success()
    if success.is_ok:
        print(f"      [OK] value: {success.value}")

    failure = get_failure()
    if not failure.is_ok:
        print(f"      [X] error: {failure.error}")


async def demonstrate_scenarios():
    """Run the top-level handler for a few representative inputs."""
    scenarios = [
        ("[2/4] Valid post", 1, "Hello!", "World! World!"),
        ("[3/4] Unknown user", 999, "Hello!", "World! World!"),
        ("[4/4] Invalid input", 1, "Hi", "short"),
    ]

    for label, user_id, title, body in scenarios:
        print(f"\n{label}")
        try:
            result = await run(user_id, title, body)
        except NetworkError as e:
            print(f"      [X] Network error, would crash here: {e}")
            continue

        if result.success:
            print("      [OK] Post created")
        else:
            print(f"      [X] {result.error_message}")


if __name__ == "__main__":
    setup_logging("WARNING")

    print("=" * 60)
    print("Typed Post Client Demo")
    print("=" * 60)

    demonstrate_result()
    asyncio.run(demonstrate_scenarios())

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)
