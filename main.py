"""Repository-root shim for running the CLI without installing it."""

from skukozh import main

if __name__ == "__main__":
    main()
