"""
Centralized constants used throughout the application, so view names,
asset locations and user-facing strings have a single source of truth.
"""

import os

from domain.models import Animal

# View names double as the navigation path prefix of each view.
START_VIEW = ""
MAIN_VIEW = "main"

PAGE_TITLE = "Animal Farm"
WELCOME_MESSAGE = "Welcome to the Animal Farm"

# Animals offered on the main view, in button order
ANIMALS = [Animal.PIG, Animal.CAT]

# Static images live under <project root>/img/<name>.png
IMG_DIR = "img"
IMG_EXT = ".png"
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Query parameter mirroring the navigation state (?view=main/pig)
VIEW_QUERY_PARAM = "view"

# Session state keys
ROUTER_KEY = "router"

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
