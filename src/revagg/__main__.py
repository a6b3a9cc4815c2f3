# src/revagg/__main__.py
from revagg.app import main

if __name__ == "__main__":
    main()
