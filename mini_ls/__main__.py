"""``python -m mini_ls [flags] [directory]`` runs the same listing as ``mini-ls``."""

from .cli import main


if __name__ == "__main__":
    main()
