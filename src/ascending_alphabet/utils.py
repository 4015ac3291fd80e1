"""
Console helpers shared between modules.
"""


def print_header(title: str):
    """Print a formatted section header."""
    width = 60
    print("\n" + "=" * width)
    print(f"  {title}")
    print("=" * width)


def print_step(step: str):
    """Print a progress step."""
    print(f"\n  -> {step}")
