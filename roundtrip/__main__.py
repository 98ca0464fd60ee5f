"""
roundtrip - DNS round-trip checker

Entry point for running as a module:
    python -m roundtrip hosts.csv
"""

from .cli import main

if __name__ == '__main__':
    main()
