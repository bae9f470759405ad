from src.shopfront.cli import app

app()
