# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-27
# Description: main.py
# -----------------------------------------------------------------------------
import logging

from fastapi import FastAPI

import settings
from api.routers import dataset, explore, health, search

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
app = FastAPI(title="GeoExplorer API")
app.include_router(health.router)
app.include_router(search.router)
app.include_router(explore.router)
app.include_router(dataset.router)

# Mount Gradio (served by the SAME uvicorn process/port)
if settings.MOUNT_UI:
    import gradio as gr

    from ui.gradio_app import build_gradio_app

    gradio_blocks = build_gradio_app(api_base_url=settings.API_BASE_URL)
    app = gr.mount_gradio_app(app, gradio_blocks, path=settings.UI_PATH)
