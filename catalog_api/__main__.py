"""Allow ``python -m catalog_api``."""

from catalog_api.main import run

run()
