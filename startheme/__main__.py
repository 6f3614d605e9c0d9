"""Package entrypoint.

`python -m startheme` runs the CLI.
"""

from startheme.app import cli


if __name__ == "__main__":
    cli()
