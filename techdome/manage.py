#!/usr/bin/env python3
import os
import sys
from pathlib import Path


def main() -> None:
    # Allow `python techdome/manage.py ...` from the repository root
    base_dir = Path(__file__).resolve().parent
    if str(base_dir) not in sys.path:
        sys.path.insert(0, str(base_dir))

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "main.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Install the project with `pip install -e .` first."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
