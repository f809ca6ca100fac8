"""Run with: python -m magnetcompass"""
from magnetcompass.main import main

if __name__ == "__main__":
    main()
