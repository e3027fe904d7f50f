from __future__ import annotations

import logging
from importlib import import_module
from typing import Any, Dict, List

from fastapi import FastAPI

from numconverter.registry import load_modules
from numconverter.settings import Settings, load_settings

logger = logging.getLogger(__name__)

INDEX_FIELDS = ("name", "title", "description", "category", "mount")


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def list_modules(
    modules: Dict[str, Dict[str, Any]], *, hide_private: bool = True
) -> List[Dict[str, Any]]:
    listed = [
        {field: meta.get(field) for field in INDEX_FIELDS}
        for meta in modules.values()
        if meta.get("public", True) or not hide_private
    ]
    listed.sort(key=lambda item: item.get("title") or item.get("name", ""))
    return listed


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="NumConverter")

    modules = load_modules(settings.modules_path)
    listed = list_modules(modules, hide_private=settings.hide_private)

    @app.get("/")
    def index() -> Dict[str, Any]:
        return {"modules": listed}

    for meta in modules.values():
        entrypoints = meta.get("entrypoints") or {}
        api_entry = entrypoints.get("api")
        if not api_entry:
            continue

        try:
            subapp = import_attr(api_entry)
        except Exception:
            logger.exception("Could not load entrypoint %s for %s", api_entry, meta["name"])
            continue

        app.mount(meta["mount"], subapp)

    return app


app = build_app()
