"""Main entry point for NewsCheck.

This file serves as the entry point for the Streamlit UI:
    streamlit run main.py
For CLI usage, use: newscheck <text>
"""

import sys

from newscheck.interfaces.streamlit.app import create_app

if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] in ("--demo", "--json", "--url", "--help", "-h"):
        print("Note: For CLI usage, use: newscheck <text>", file=sys.stderr)
        print("\nRunning Streamlit UI instead...\n", file=sys.stderr)

    create_app()
