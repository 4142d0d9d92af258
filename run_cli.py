"""
Interactive entry point for the YouTube notes CLI.
"""

from ytnotes.main import main


if __name__ == "__main__":
    main()
