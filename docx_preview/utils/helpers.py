"""Small helpers shared by the parser, the style resolver and the renderer."""

import copy
import re
from dataclasses import fields, is_dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


def key_by(items: Iterable[T], by: Callable[[T], Any]) -> Dict[Any, T]:
    """Index items by key; later items win on duplicate keys."""
    return {by(item): item for item in items}


def merge_deep(target: Any, source: Any) -> Any:
    """
    Merge ``source`` underneath ``target``.

    Values already present on ``target`` win. Missing values are deep-copied
    from ``source`` and nested mappings or dataclasses are merged recursively.
    Works on dicts and dataclass instances.

    Returns:
        The merged target (a copy of ``source`` when ``target`` is None)
    """
    if source is None:
        return target
    if target is None:
        return copy.deepcopy(source)

    if is_dataclass(target) and is_dataclass(source):
        for f in fields(source):
            if not hasattr(target, f.name):
                continue
            mine = getattr(target, f.name)
            theirs = getattr(source, f.name)
            if mine is None:
                setattr(target, f.name, copy.deepcopy(theirs))
            elif _mergeable(mine, theirs):
                merge_deep(mine, theirs)
        return target

    if isinstance(target, dict) and isinstance(source, dict):
        for key, theirs in source.items():
            mine = target.get(key)
            if mine is None:
                target[key] = copy.deepcopy(theirs)
            elif _mergeable(mine, theirs):
                merge_deep(mine, theirs)
        return target

    return target


def _mergeable(mine: Any, theirs: Any) -> bool:
    if isinstance(mine, dict) and isinstance(theirs, dict):
        return True
    return is_dataclass(mine) and is_dataclass(theirs) and not isinstance(mine, type)


def copy_style_properties(source: Optional[Dict[str, str]], target: Optional[Dict[str, str]],
                          keys: Optional[Iterable[str]] = None) -> Dict[str, str]:
    """Copy keys of ``source`` that ``target`` does not define yet."""
    if target is None:
        target = {}
    if not source:
        return target

    for key in (keys if keys is not None else list(source)):
        if key in source and key not in target:
            target[key] = source[key]
    return target


def escape_class_name(class_name: Optional[str]) -> Optional[str]:
    if class_name is None:
        return None
    escaped = re.sub(r"[ .]+", "-", class_name)
    escaped = re.sub(r"&+", "and", escaped)
    return escaped.lower()


def split_path(path: str) -> Tuple[str, str]:
    """Split ``word/document.xml`` into ``("word/", "document.xml")``."""
    index = path.rfind("/") + 1
    if index == 0:
        return "", path
    return path[:index], path[index:]


def normalize_path(path: str) -> str:
    return path[1:] if path.startswith("/") else path


def resolve_path(target: str, base: str) -> str:
    """
    Resolve a relationship target against the folder of the referring part.

    Absolute targets (leading ``/``) resolve from the package root,
    ``..`` segments walk up from ``base``.
    """
    if target.startswith("/"):
        segments = []
        parts = target[1:].split("/")
    else:
        segments = [s for s in base.split("/") if s]
        parts = target.split("/")

    for part in parts:
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)

    resolved = "/".join(segments)
    if target.endswith("/") and resolved:
        resolved += "/"
    return resolved
