"""
Run the Book Vibe backend: ``python -m bookvibe``.
"""
from bookvibe.main import run

if __name__ == "__main__":
    run()
