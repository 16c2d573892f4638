"""Entry point for `python -m catppuccin_thunderbird`."""

import sys


def main():
    from catppuccin_thunderbird.app import run_build
    sys.exit(run_build())


if __name__ == "__main__":
    main()
