"""CLI entry point for `python -m nydus_build.cli`."""

from nydus_build.cli.main import main


if __name__ == "__main__":
    main()
