from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from numconverter.settings import modules_path as default_modules_path

logger = logging.getLogger(__name__)

MANIFEST_NAME = "module.yaml"


def _normalize_module(data: Dict[str, Any], *, path: Path) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or str(name).replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": str(name),
            "slug": slug,
            "mount": mount,
            "public": bool(public),
            "path": path,
        }
    )
    return normalized


def _read_manifest(manifest: Path) -> Dict[str, Any] | None:
    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("Skipping unreadable manifest %s", manifest, exc_info=True)
        return None
    if not isinstance(data, dict):
        logger.warning("Skipping manifest %s: expected a mapping", manifest)
        return None
    return data


def load_modules(modules_path: Path | None = None) -> Dict[str, Dict[str, Any]]:
    root = modules_path if modules_path is not None else default_modules_path()
    modules: Dict[str, Dict[str, Any]] = {}
    if not root.exists():
        return modules

    for module_dir in sorted(root.iterdir()):
        if not module_dir.is_dir():
            continue
        manifest = module_dir / MANIFEST_NAME
        if not manifest.exists():
            continue
        data = _read_manifest(manifest)
        if data is None:
            continue
        normalized = _normalize_module(data, path=module_dir)
        if normalized is None:
            logger.warning("Skipping manifest %s: missing name", manifest)
            continue
        if normalized["name"] in modules:
            logger.warning("Duplicate module name %r in %s", normalized["name"], manifest)
            continue
        modules[normalized["name"]] = normalized
    return modules
