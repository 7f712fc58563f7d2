"""Web Server Gateway Interface entry-point."""
from himlearning import create_app

app = create_app()
