# src/file_merge/__main__.py

from .cli import app

app(prog_name="file-merge")
