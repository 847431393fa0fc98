from nozes.cli.app import app

app()
