# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Description: gradio_app.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

import gradio as gr
import pandas as pd
import requests

import settings
from ui.map_html import build_map_iframe


# Environment configuration
API_BASE_URL = settings.API_BASE_URL
LOG_FILE = settings.LOG_FILE
LOG_TAIL_LINES = settings.UI_LOG_TAIL_LINES
TIMEOUT_SECONDS = settings.UI_TIMEOUT_SECONDS

MODE_CHOICES = ["term", "embedding"]


# Small URL helpers
def _url(path: str) -> str:
    return f"{API_BASE_URL}{path}"


def _get(path: str, params: Optional[dict] = None) -> Dict[str, Any]:
    try:
        r = requests.get(_url(path), params=params, timeout=TIMEOUT_SECONDS)
        r.raise_for_status()
        return r.json()
    except requests.exceptions.RequestException as e:
        return {"error": f"API request failed: {e}"}


def _post(path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    try:
        r = requests.post(_url(path), json=payload, timeout=TIMEOUT_SECONDS)
        if not r.ok:
            try:
                detail = r.json().get("detail")
            except ValueError:
                detail = r.text
            return {"error": detail or f"HTTP {r.status_code}", "status_code": r.status_code}
        return r.json()
    except requests.exceptions.RequestException as e:
        return {"error": f"RequestException: {e}"}


# Log tailing for UI
def tail_log_file(path: str, n_lines: int = 200) -> str:
    """
    Tail last n_lines from a local log file path.
    """
    try:
        if not path or not os.path.exists(path):
            return f"[log] file not found: {path}"
        with open(path, "rb") as f:
            data = f.read()
        text = data.decode("utf-8", errors="replace")
        lines = text.splitlines()[-int(n_lines):]
        return "\n".join(lines)
    except OSError as e:
        return f"[log] failed to read log file: {e}"


def _map_config() -> Dict[str, Any]:
    return _get("/map/config")


def _render_map(geojson=None, highlight=None, fit=None) -> str:
    cfg = _map_config()
    if "error" in cfg:
        return f"<p>Map unavailable: {cfg['error']}</p>"
    return build_map_iframe(cfg, geojson=geojson, highlight_bounds=highlight, fit_bounds=fit)


def _results_frame(results) -> pd.DataFrame:
    rows = [
        {"#": i + 1, "score": round(h.get("score") or 0.0, 4), "description": h.get("description"), "bbox": h.get("bbox")}
        for i, h in enumerate(results or [])
    ]
    return pd.DataFrame(rows, columns=["#", "score", "description", "bbox"])


# Search UI functions
def ui_search(query: str, mode: str) -> Tuple[str, pd.DataFrame, str, str, Optional[Dict[str, Any]]]:
    query = (query or "").strip()
    if not query:
        return settings.BLANK_QUERY_PROMPT, _results_frame([]), _render_map(), "", None

    out = _post("/search", payload={"query": query, "mode": mode or None})
    if "error" in out:
        return f"**Error:** {out['error']}", _results_frame([]), _render_map(), "", None

    summary = f"**{out['count']}** result(s) for `{out['query']}` (mode: {out['mode_used']})"
    if out.get("fallback_reason"):
        summary += f"  \nEmbedding search unavailable, used term overlap: {out['fallback_reason']}"

    geojson = out.get("geojson")
    map_html = _render_map(geojson=geojson, fit=out.get("fit_bounds"))
    return summary, _results_frame(out.get("results")), map_html, out.get("url") or "", geojson


def ui_example(idx: int, mode: str):
    """Run the next example query, cycling through settings.EXAMPLE_QUERIES."""
    queries = settings.EXAMPLE_QUERIES
    idx = int(idx or 0) % len(queries)
    query = queries[idx]
    summary, df, map_html, url, geojson = ui_search(query, mode)
    return query, summary, df, map_html, url, geojson, (idx + 1) % len(queries)


# Explore UI functions
def _explore_view(state: Dict[str, Any], geojson: Optional[Dict[str, Any]]) -> Tuple[str, str, str]:
    if "error" in state:
        return f"**Error:** {state['error']}", "", _render_map(geojson=geojson)

    if not state.get("open"):
        message = "Run a search, then press Explore." if not state.get("total") else "Explore panel closed."
        return message, "", _render_map(geojson=geojson)

    item = state.get("item") or {}
    position = f"{state['index'] + 1} / {state['total']}"
    return item.get("description") or "", position, _render_map(geojson=geojson, highlight=state.get("highlight_bounds"))


def ui_explore(action: str, geojson: Optional[Dict[str, Any]]) -> Tuple[str, str, str]:
    state = _post(f"/explore/{action}")
    return _explore_view(state, geojson)


# Build Gradio UI
def build_gradio_app(api_base_url: str = API_BASE_URL) -> gr.Blocks:
    global API_BASE_URL
    API_BASE_URL = api_base_url.rstrip("/")

    with gr.Blocks(title="GeoExplorer", analytics_enabled=False) as demo:
        gr.Markdown(f""" # GeoExplorer (Banepa) **API:** `{API_BASE_URL}`  **Log file:** `{LOG_FILE}`""")

        last_geojson = gr.State(None)
        example_idx = gr.State(0)

        with gr.Tab("Search"):
            with gr.Row():
                q_text = gr.Textbox(label="Query", placeholder="Where are the blue roofs near the river?")
                q_mode = gr.Radio(MODE_CHOICES, value=settings.SCORING_MODE_DEFAULT, label="Scoring mode")
            with gr.Row():
                q_btn = gr.Button("Search")
                q_example = gr.Button("Try an example")
            q_summary = gr.Markdown()
            q_map = gr.HTML()
            q_url = gr.Textbox(label="Shareable URL", interactive=False)
            q_results = gr.Dataframe(label="Results", interactive=False)

            search_outputs = [q_summary, q_results, q_map, q_url, last_geojson]
            q_btn.click(fn=ui_search, inputs=[q_text, q_mode], outputs=search_outputs)
            q_text.submit(fn=ui_search, inputs=[q_text, q_mode], outputs=search_outputs)
            q_example.click(
                fn=ui_example,
                inputs=[example_idx, q_mode],
                outputs=[q_text, q_summary, q_results, q_map, q_url, last_geojson, example_idx],
            )

        with gr.Tab("Explore"):
            with gr.Row():
                e_start = gr.Button("Explore")
                e_prev = gr.Button("Previous")
                e_next = gr.Button("Next")
                e_close = gr.Button("Close")
            e_position = gr.Markdown()
            e_description = gr.Markdown()
            e_map = gr.HTML()

            explore_outputs = [e_description, e_position, e_map]
            e_start.click(fn=lambda g: ui_explore("start", g), inputs=[last_geojson], outputs=explore_outputs)
            e_prev.click(fn=lambda g: ui_explore("prev", g), inputs=[last_geojson], outputs=explore_outputs)
            e_next.click(fn=lambda g: ui_explore("next", g), inputs=[last_geojson], outputs=explore_outputs)
            e_close.click(fn=lambda g: ui_explore("close", g), inputs=[last_geojson], outputs=explore_outputs)

        with gr.Tab("Logs"):
            with gr.Row():
                log_path = gr.Textbox(label="Log file path", value=LOG_FILE)
                tail_lines = gr.Slider(50, 2000, value=LOG_TAIL_LINES, step=50, label="Tail lines")
                refresh_logs_btn = gr.Button("Refresh logs")
            log_view = gr.Textbox(label="Logs", value="", lines=25, interactive=False)

            refresh_logs_btn.click(fn=tail_log_file, inputs=[log_path, tail_lines], outputs=[log_view])

        # Initial map
        demo.load(fn=_render_map, inputs=None, outputs=[q_map])

    return demo


if __name__ == "__main__":
    import threading
    import uvicorn

    API_HOST = os.getenv("GEO_API_HOST", "127.0.0.1")
    API_PORT = int(os.getenv("GEO_API_PORT", "8000"))

    UI_HOST = os.getenv("GEO_UI_HOST", "127.0.0.1")
    UI_PORT = int(os.getenv("GEO_UI_PORT", "7860"))

    def run_api() -> None:
        uvicorn.run(
            "api.main:app",
            host=API_HOST,
            port=API_PORT,
            log_level="info",
            reload=False,
        )

    api_thread = threading.Thread(target=run_api, daemon=True)
    api_thread.start()

    demo = build_gradio_app()
    demo.launch(server_name=UI_HOST, server_port=UI_PORT)
