"""Allow ``python -m recordproxy``."""

from recordproxy.cli.main import cli

if __name__ == "__main__":
    cli()
