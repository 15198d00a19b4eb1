from examples_metadata.cli import app

app()
