"""Run with: python -m curveexplorer"""
import sys

from curveexplorer.main import main

if __name__ == "__main__":
    sys.exit(main())
