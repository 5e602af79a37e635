import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "main.settings")
django.setup()
