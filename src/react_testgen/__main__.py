"""Entry point for the react-testgen package."""

from react_testgen.cli import main

if __name__ == "__main__":
    main()
