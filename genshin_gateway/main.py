# genshin_gateway/main.py
# Entry point for Uvicorn: `uvicorn genshin_gateway.main:app`
from genshin_gateway.adapters.api.main import create_app

app = create_app()
