"""Allow ``python -m quoteview.cli``."""

from .main import app

app()
